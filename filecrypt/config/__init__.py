from .settings import Settings, CryptoParams

__all__ = ["Settings", "CryptoParams"]
