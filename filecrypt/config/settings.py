import os
import json
import logging
from dataclasses import dataclass, fields, replace

logger = logging.getLogger("FileCrypt.Settings")


@dataclass(frozen=True)
class CryptoParams:
    """Crypto parameters read once at session start."""
    aes_key_bytes:        int = 32
    aes_iv_bytes:         int = 16
    hmac_key_bytes:       int = 32
    utf16_window:         int = 200
    utf16_zero_threshold: int = 3
    preview_limit:        int = 10000


class Settings:
    """Centralised application configuration."""

    # ── application ──────────────────────────────────────────────
    APP_NAME    = "FileCrypt"
    APP_VERSION = "1.0.0"

    # ── paths ────────────────────────────────────────────────────
    CONFIG_FILE = "config.json"
    ENV_PREFIX  = "FILECRYPT_"

    # ── logging ──────────────────────────────────────────────────
    LOG_LEVEL  = "INFO"
    LOG_FORMAT = "[%(asctime)s] [%(levelname)-8s] %(name)s — %(message)s"
    LOG_DATEFMT = "%H:%M:%S"

    # environment overrides, e.g. FILECRYPT_AES_KEY_BYTES=16
    ENV_KEYS = ("aes_key_bytes", "aes_iv_bytes", "hmac_key_bytes")

    # config keys whose lower bound is not 1
    MIN_VALUES = {"utf16_zero_threshold": 0}

    @classmethod
    def load_crypto_params(cls, path: str | None = None,
                           environ: dict | None = None) -> CryptoParams:
        """
        Build CryptoParams from defaults, then config.json, then the
        environment.  Missing or invalid input falls back to defaults.
        """
        params  = CryptoParams()
        path    = path or cls.CONFIG_FILE
        environ = os.environ if environ is None else environ

        params = replace(params, **cls._read_config_file(path))

        overrides = {}
        for name in cls.ENV_KEYS:
            var = cls.ENV_PREFIX + name.upper()
            if var in environ:
                value = cls._int_setting(var, environ[var])
                if value is not None:
                    overrides[name] = value
        params = replace(params, **overrides)

        logger.debug("Crypto params: %s", params)
        return params

    # ── internal ─────────────────────────────────────────────────
    @classmethod
    def _read_config_file(cls, path: str) -> dict:
        try:
            with open(path, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError:
            logger.info("Could not open %s — using defaults", path)
            return {}
        try:
            doc = json.loads(raw)
        except ValueError:
            doc = None
        if not isinstance(doc, dict):
            logger.warning("%s invalid — using defaults", path)
            return {}

        known  = {f.name for f in fields(CryptoParams)}
        values = {}
        for name, raw_value in doc.items():
            if name not in known:
                logger.debug("Ignoring unknown config key %r", name)
                continue
            value = cls._int_setting(name, raw_value,
                                      minimum=cls.MIN_VALUES.get(name, 1))
            if value is not None:
                values[name] = value
        return values

    @staticmethod
    def _int_setting(name: str, raw_value, minimum: int = 1) -> int | None:
        if isinstance(raw_value, bool):
            value = None
        elif isinstance(raw_value, int):
            value = raw_value
        else:
            try:
                value = int(str(raw_value).strip())
            except ValueError:
                value = None
        if value is None or value < minimum:
            logger.warning(
                "Ignoring %s=%r (expected an integer >= %d)",
                name, raw_value, minimum,
            )
            return None
        return value
