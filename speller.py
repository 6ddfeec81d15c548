import argparse
import json
import logging
import os
import sys
from datetime import datetime
from decimal import Decimal, InvalidOperation

from amount_samples import SAMPLES_FILENAME, AmountSampleGenerator
from amount_words import AmountError, speak
from invoice_totals import DEFAULT_CURRENCY, InvoiceError, amount_in_words_line, load_invoice

logger = logging.getLogger("speller")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class HumanFormatter(logging.Formatter):
    def format(self, record):
        ts = datetime.now().strftime("%H:%M:%S")
        line = f"{ts} [{record.levelname[0]}] {record.name}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level=None):
    if level is None:
        level = os.environ.get("SPELLER_LOG_LEVEL", "WARNING")
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    root = logging.getLogger()
    root.setLevel(getattr(logging, level))
    root.handlers.clear()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(HumanFormatter())
    root.addHandler(console)
    # matplotlib is chatty at DEBUG
    logging.getLogger("matplotlib").setLevel(logging.WARNING)
    logger.debug("Logging initialized at %s", level)


def parse_amount(text):
    try:
        return Decimal(text.strip())
    except InvalidOperation:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def spell(amount, currency=DEFAULT_CURRENCY):
    words = speak(amount)
    line = amount_in_words_line(amount, currency)
    print(f"Amount: {amount}")
    print(f"Words: {words}")
    print(f"Line: {line}")
    print(f"Length: {len(line)}")


def show_invoice(path, currency=None, as_json=False):
    invoice = load_invoice(path, currency=currency)
    summary = invoice.summary()
    if as_json:
        print(json.dumps(summary, indent=2, sort_keys=True))
        return
    if summary["invoice_number"]:
        print(f"Invoice: {summary['invoice_number']}")
    for item in summary["items"]:
        print(
            f"  {item['description'] or '-'}: "
            f"{item['quantity']:g} x {item['unit_price']} = {item['total']}"
        )
    print(f"Subtotal: {summary['subtotal']}")
    print(f"VAT ({summary['vat_percentage']:g}%): {summary['vat']}")
    print(f"Total: {summary['grand_total']}")
    print(f"Amount in words: {summary['amount_in_words']}")


def main(argv=None):
    parser = cmdline_parser()
    args = parser.parse_args(argv)
    try:
        setup_logging(args.log_level)
    except ValueError as exc:
        parser.error(str(exc))

    if args.probe:
        try:
            from tests.amount_probes import run_amount_probes
        except ImportError:
            parser.error("--probe needs the tests/ directory; run it from a source checkout.")

        samples_path = os.path.join(args.output_dir, SAMPLES_FILENAME)
        try:
            report = run_amount_probes(samples_path, open_browser=not args.no_browser)
        except FileNotFoundError as exc:
            parser.error(str(exc))
        print(f"Wrote probe report to {report}")
        return 0

    if args.generate_samples:
        try:
            generator = AmountSampleGenerator(
                output_dir=args.output_dir,
                sample_size=args.sample_size,
                seed=args.seed,
            )
        except ValueError as exc:
            parser.error(str(exc))
        path = generator.generate_all()
        print(f"Wrote samples to {path}")
        return 0

    if args.invoice is not None:
        if not os.path.isfile(args.invoice):
            parser.error(f"Invoice not found: {args.invoice}")
        try:
            show_invoice(args.invoice, currency=args.currency, as_json=args.json)
        except (InvoiceError, AmountError) as exc:
            logger.debug("Invoice %s rejected", args.invoice, exc_info=True)
            parser.error(f"Cannot process invoice {args.invoice}: {exc}")
        return 0

    if args.spell is not None:
        try:
            spell(args.spell, currency=args.currency or DEFAULT_CURRENCY)
        except AmountError as exc:
            parser.error(f"Cannot spell {args.spell}: {exc}")
        return 0

    parser.print_help()
    return 0


def cmdline_parser():
    epilog = (
        "Examples:\n"
        "  speller.py --spell 1234.56\n"
        "  speller.py --invoice invoice.json --currency dollars\n"
        "  speller.py --generate-samples --sample-size 5000\n"
    )
    parser = argparse.ArgumentParser(
        description="Spell invoice amounts in English words.",
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--spell",
        type=parse_amount,
        help="Print the spelled-out form of an amount and its invoice line.",
    )
    group.add_argument(
        "--invoice",
        type=str,
        help="Print totals and the amount in words for an invoice JSON file.",
    )
    group.add_argument(
        "--generate-samples",
        action="store_true",
        help="Generate sample amounts with spelled lengths under --output-dir.",
    )
    group.add_argument(
        "--probe",
        action="store_true",
        help=(
            "Build the spelled length report from the generated samples.\n"
            "Only available from a source checkout."
        ),
    )
    parser.add_argument(
        "--currency",
        default=None,
        help=f"Currency word appended to the amount in words (default: {DEFAULT_CURRENCY}).",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the invoice summary as JSON (with --invoice).",
    )
    parser.add_argument(
        "--output-dir",
        default="data",
        help="Directory for generated samples.",
    )
    parser.add_argument(
        "--sample-size",
        type=int,
        default=10_000,
        help="Number of random amounts to generate besides the boundary amounts.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for sample generation.",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Do not open the probe report in a browser.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Log level (default: SPELLER_LOG_LEVEL or WARNING).",
    )

    return parser


if __name__ == "__main__":
    sys.exit(main())
