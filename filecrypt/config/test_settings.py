import json

from filecrypt.config.settings import Settings, CryptoParams


def _load(tmp_path, doc=None, raw=None, environ=None):
    path = tmp_path / "config.json"
    if doc is not None:
        path.write_text(json.dumps(doc))
    elif raw is not None:
        path.write_text(raw)
    return Settings.load_crypto_params(str(path), environ or {})


def test_defaults_when_missing(tmp_path):
    assert _load(tmp_path) == CryptoParams()
    p = CryptoParams()
    assert (p.aes_key_bytes, p.aes_iv_bytes, p.hmac_key_bytes) == (32, 16, 32)


def test_reads_config_file(tmp_path):
    p = _load(tmp_path, {"aes_key_bytes": 16, "hmac_key_bytes": 64})
    assert p.aes_key_bytes == 16
    assert p.hmac_key_bytes == 64
    assert p.aes_iv_bytes == 16


def test_invalid_json_uses_defaults(tmp_path):
    assert _load(tmp_path, raw="{not json") == CryptoParams()
    assert _load(tmp_path, raw="[1, 2]") == CryptoParams()


def test_bad_values_ignored(tmp_path):
    p = _load(tmp_path, {"aes_key_bytes": -1, "aes_iv_bytes": "x",
                         "hmac_key_bytes": True, "unknown": 5})
    assert p == CryptoParams()


def test_environment_overrides_file(tmp_path):
    p = _load(tmp_path, {"aes_key_bytes": 24},
              environ={"FILECRYPT_AES_KEY_BYTES": "16",
                       "FILECRYPT_HMAC_KEY_BYTES": "zero"})
    assert p.aes_key_bytes == 16
    assert p.hmac_key_bytes == 32


def test_sniffer_settings_from_file(tmp_path):
    p = _load(tmp_path, {"utf16_zero_threshold": 5, "preview_limit": 100})
    assert p.utf16_zero_threshold == 5
    assert p.preview_limit == 100


def test_zero_threshold_accepted(tmp_path):
    p = _load(tmp_path, {"utf16_zero_threshold": 0})
    assert p.utf16_zero_threshold == 0


def test_zero_sizes_rejected(tmp_path):
    p = _load(tmp_path, {"aes_key_bytes": 0, "utf16_window": 0,
                         "utf16_zero_threshold": -1})
    assert p == CryptoParams()


def test_defaults_stated_once():
    for name in ("AES_KEY_SIZE", "AES_IV_SIZE", "HMAC_KEY_SIZE"):
        assert not hasattr(Settings, name)
