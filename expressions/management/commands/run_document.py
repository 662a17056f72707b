"""
Management command to compile and run an expression document:
- Reads the document from a file, or from stdin when the path is "-"
- Writes one evaluated value per input line, in input order
- Blank lines print "null", lines that fail to compile print their diagnostic
"""
import logging
import sys

from django.core.management.base import BaseCommand, CommandError

from expressions.dsl import format_value
from expressions.dsl.ast_nodes import ResultType
from expressions.utils import evaluate_document

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = "Compile an expression document and print the value of every line"

    def add_arguments(self, parser):
        parser.add_argument(
            "path",
            nargs="?",
            default="-",
            help="Document to run, or - to read from stdin",
        )
        parser.add_argument(
            "--tree",
            action="store_true",
            help="Print the compiled tree of each line instead of its value",
        )
        parser.add_argument(
            "--fail-on-error",
            action="store_true",
            help="Exit with an error if any line failed to compile",
        )

    def handle(self, *args, **options):
        document = self.read_document(options["path"])
        lines = evaluate_document(document)

        for line in lines:
            if options["tree"]:
                self.stdout.write(line["tree"])
            else:
                self.stdout.write(format_value(line["value"]))

        error_lines = [str(line["line"]) for line in lines if line["type"] == ResultType.ERROR.value]
        logger.info(f"Ran document {options['path']}: {len(lines)} lines, {len(error_lines)} errors")

        if error_lines and options["fail_on_error"]:
            raise CommandError(f"Compilation failed on line(s) {', '.join(error_lines)}")

    def read_document(self, path):
        if path == "-":
            return sys.stdin.read()
        try:
            with open(path, encoding="utf-8") as handle:
                return handle.read()
        except OSError as e:
            raise CommandError(f"Cannot read document {path}: {e}") from e
