from .random_gen import SecureRandom
from .hex_codec  import HexCodec
from .file_io    import FileIO

__all__ = ["SecureRandom", "HexCodec", "FileIO"]
