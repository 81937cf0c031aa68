"""
scripts/gen_sample_cert.py
Render sample certificates against the configured assets, for checking the
layout by eye.

    python -m ocw_certificates.scripts.gen_sample_cert --out-dir samples
    python -m ocw_certificates.scripts.gen_sample_cert --name "Juan Pablo" --level A2
"""
import argparse
from datetime import date
from pathlib import Path

from ocw_certificates.core.exceptions import CertificateError
from ocw_certificates.models.certificate_model import CertificateRequest
from ocw_certificates.services.asset_store import AssetStore
from ocw_certificates.services.pdf_generator import generate_certificate_pdf
from ocw_certificates.utils.helpers import certificate_filename, get_logger

logger = get_logger(__name__)

# Short, medium and very long names (the last one exercises the auto-scaling)
SAMPLES = [
    ("Barbie Kim", "A1"),
    ("Barbara Andrea Arias", "B1"),
    ("Barbara Andrea Arias Buroz de la Santisima Trinidad", "C1"),
]


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate sample certificate PDFs.")
    parser.add_argument("--name", help="Student name; omit to render the built-in samples.")
    parser.add_argument("--level", default="B1", help="Proficiency level used with --name.")
    parser.add_argument("--date", default=date.today().isoformat(), help="Completion date (YYYY-MM-DD).")
    parser.add_argument("--assets-dir", help="Assets directory (defaults to the configured search path).")
    parser.add_argument("--out-dir", default=".", help="Directory the PDFs are written to.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    samples = [(args.name, args.level)] if args.name else SAMPLES

    assets = AssetStore.from_directory(args.assets_dir)
    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    failures = 0
    for name, level in samples:
        request = CertificateRequest(student_name=name, level=level, date=args.date)
        try:
            pdf_bytes = generate_certificate_pdf(request, assets)
        except CertificateError as e:
            logger.error(f"Could not generate sample for '{name}': {e.message}")
            failures += 1
            continue
        path = out_dir / certificate_filename(name)
        path.write_bytes(pdf_bytes)
        logger.info(f"Sample written: {path}")

    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
