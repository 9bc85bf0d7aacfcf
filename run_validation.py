"""
Command-line runner for the code block validators.

Reads a markdown file, validates every code block of the requested kind,
prints the report and (optionally) writes the structured result as JSON.

    python run_validation.py answer.md --kind javascript
    python run_validation.py answer.md --kind graphql --schema admin
    python run_validation.py answer.md --kind components --package @shopify/app-bridge-ui-types
"""
import argparse
import json
import logging
import sys
from pathlib import Path

from codecheck.config.settings import DEFAULT_GRAPHQL_SCHEMA, GRAPHQL_SCHEMA_DIR, LOG_LEVEL
from codecheck.validations.aggregate import format_report
from codecheck.validations.pipeline import CodeKind, validate_markdown
from codecheck.validations.schema_provider import IntrospectionFileProvider

# ---------------------------------------------------------------------------
# Setup logging
# ---------------------------------------------------------------------------
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s — %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger("run_validation")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate the code blocks of a markdown file.")
    parser.add_argument("input", type=Path, help="Markdown file to validate")
    parser.add_argument("--kind", required=True, choices=[k.value for k in CodeKind])
    parser.add_argument("--schema", default=DEFAULT_GRAPHQL_SCHEMA, help="GraphQL schema identifier")
    parser.add_argument("--schema-dir", default=GRAPHQL_SCHEMA_DIR, help="Directory of introspection documents")
    parser.add_argument("--package", help="Component schema package identifier")
    parser.add_argument("--schemas", type=Path, help="JSON file with an explicit tag → schema mapping")
    parser.add_argument("--output", type=Path, help="Write the structured result to this JSON file")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    kind = CodeKind(args.kind)

    # -----------------------------------------------------------------------
    # Load inputs
    # -----------------------------------------------------------------------
    logger.info("Loading %s", args.input)
    with open(args.input, encoding="utf-8") as f:
        text = f.read()

    options = {}
    if kind is CodeKind.GRAPHQL:
        options["schema_name"] = args.schema
        options["schema_provider"] = IntrospectionFileProvider(args.schema_dir)
    elif kind is CodeKind.COMPONENTS:
        if args.schemas is not None:
            with open(args.schemas, encoding="utf-8") as f:
                options["schemas"] = json.load(f)
        else:
            options["package_name"] = args.package

    # -----------------------------------------------------------------------
    # Validate
    # -----------------------------------------------------------------------
    batch = validate_markdown(text, kind, **options)
    logger.info("Validated %d outcome(s): valid=%s", len(batch.outcomes), batch.overall_valid)

    if args.output is not None:
        with open(args.output, "w", encoding="utf-8") as f:
            json.dump(batch.to_dict(), f, ensure_ascii=False, indent=2)
        logger.info("Output saved to: %s", args.output)

    # -----------------------------------------------------------------------
    # Print summary
    # -----------------------------------------------------------------------
    print(format_report(batch))
    return 0 if batch.overall_valid else 1


if __name__ == "__main__":
    sys.exit(main())
