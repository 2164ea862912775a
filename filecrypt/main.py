"""
FileCrypt — command-line entry point

Commands
────────
keygen    – generate a symmetric key and an HMAC key (hex)
encrypt   – AES-CBC encrypt a file  → IV || ciphertext
decrypt   – AES-CBC decrypt a file  → plaintext (text preview if text)
sha256    – SHA-256 digest of a file (hex)
hmac      – HMAC-SHA256 of a file   → original bytes || tag

Each command prints the status line and the output preview, and saves
the export artifact when ``-o`` is given (``-o auto`` uses the suggested
file name).
"""

import sys
import logging
import argparse

from .config.settings import Settings
from .core.session import ProcessingSession, Operation
from .errors import FileCryptError
from .utils.file_io import FileIO

logger = logging.getLogger("FileCrypt.Main")

_COMMANDS = {
    "keygen":  Operation.GENERATE_KEY,
    "encrypt": Operation.ENCRYPT,
    "decrypt": Operation.DECRYPT,
    "sha256":  Operation.DIGEST,
    "hmac":    Operation.MAC,
}


def _setup_logging(verbose: bool):
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG if verbose else Settings.LOG_LEVEL)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(
        Settings.LOG_FORMAT, datefmt=Settings.LOG_DATEFMT,
    ))
    root_logger.addHandler(console_handler)


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="filecrypt",
        description="AES-CBC / SHA-256 / HMAC-SHA256 file processing",
    )
    ap.add_argument("--config", default=None,
                    help=f"JSON config file (default {Settings.CONFIG_FILE})")
    ap.add_argument("-v", "--verbose", action="store_true")

    sub = ap.add_subparsers(dest="cmd", required=True)

    p_key = sub.add_parser("keygen", help="Generate symmetric + HMAC keys")
    p_key.add_argument("-o", "--output", default=None)

    for name, help_text in (
        ("encrypt", "Encrypt a file (key generated if omitted)"),
        ("decrypt", "Decrypt an IV || ciphertext file"),
        ("sha256",  "SHA-256 digest of a file"),
        ("hmac",    "Append HMAC-SHA256 tag to a file"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("infile")
        p.add_argument("-o", "--output", default=None)
        if name != "sha256":
            p.add_argument("--key", default="", help="Symmetric key (hex)")
        if name == "hmac":
            p.add_argument("--hmac-key", default="", help="HMAC key (hex)")
            p.add_argument("--text", action="store_true",
                           help="Save the text preview instead of input || tag")
    return ap


def run(argv=None, configure_logging: bool = True) -> int:
    args = _build_parser().parse_args(argv)
    if configure_logging:
        _setup_logging(args.verbose)
    logger.debug("%s v%s started", Settings.APP_NAME, Settings.APP_VERSION)

    params  = Settings.load_crypto_params(args.config)
    session = ProcessingSession(params)

    try:
        if args.cmd != "keygen":
            data, name = FileIO.read_input(args.infile)
            session.load_input(data, name)

        result = session.process(
            _COMMANDS[args.cmd],
            key_hex=getattr(args, "key", ""),
            hmac_key_hex=getattr(args, "hmac_key", ""),
        )

        keys = result.generated_keys
        if keys is not None:
            print(f"symmetric_key_hex:{keys.symmetric_key_hex}")
            print(f"hmac_key_hex:{keys.hmac_key_hex}")
        elif result.key_resolution and result.key_resolution.generated_now:
            print(f"hmac_key_hex:{result.key_resolution.key_hex}")

        print(result.display_text(params.preview_limit))

        if args.output:
            artifact = session.export(as_text=getattr(args, "text", False))
            path = artifact.suggested_name if args.output == "auto" \
                else args.output
            saved = FileIO.write_artifact(path, artifact)
            print(f"Saved {saved}")

    except FileCryptError as exc:
        detail = str(exc)
        line   = exc.status if detail == exc.status \
            else f"{exc.status}: {detail}"
        print(line, file=sys.stderr)
        return 1

    print(result.status, file=sys.stderr)
    return 0


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
