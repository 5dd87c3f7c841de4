"""schemaloom CLI - generate class models from JSON schemas."""

import argparse
import logging
import sys

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the schemaloom CLI."""
    parser = argparse.ArgumentParser(
        prog="schemaloom",
        description="Generate Java class models from JSON schemas",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Log level (default: WARNING)",
    )
    parser.add_argument(
        "--log-json",
        action="store_true",
        help="Emit logs as JSON",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Generate command
    generate_parser = subparsers.add_parser("generate", help="Generate classes from schema files")
    generate_parser.add_argument(
        "schemas",
        nargs="+",
        help="Schema files (one class per file)",
    )
    generate_parser.add_argument(
        "--class-name",
        "-c",
        help="Class name (only with a single schema; default: title or file name)",
    )
    generate_parser.add_argument(
        "--package",
        "-p",
        help="Target package (default: SCHEMALOOM_TARGET_PACKAGE)",
    )
    generate_parser.add_argument(
        "--jsr303",
        action="store_true",
        default=None,
        help="Add @NotNull to required fields",
    )
    generate_parser.add_argument(
        "--jakarta",
        action="store_true",
        default=None,
        help="Use jakarta.validation annotations",
    )
    generate_parser.add_argument(
        "--swagger2",
        action="store_true",
        default=None,
        help="Add @ApiModelProperty metadata",
    )
    generate_parser.add_argument(
        "--primitives",
        action="store_true",
        default=None,
        help="Use primitive types for integer, number and boolean",
    )
    generate_parser.add_argument(
        "--builders",
        action="store_true",
        default=None,
        help="Add withX builder methods",
    )
    generate_parser.add_argument(
        "--workers",
        type=int,
        help="Worker threads (default: SCHEMALOOM_MAX_WORKERS or 4)",
    )
    generate_parser.add_argument(
        "--json",
        action="store_true",
        help="Print a JSON report instead of text",
    )

    # Rules command
    subparsers.add_parser("rules", help="List pipeline rules")

    args = parser.parse_args(argv)

    from dotenv import load_dotenv

    from loom_core.log_setup import setup_logging

    load_dotenv()
    setup_logging(args.log_level, json_format=args.log_json)

    if args.command is None:
        parser.print_help()
        return 0

    if args.command == "generate":
        return _cmd_generate(args)

    if args.command == "rules":
        return _cmd_rules(args)

    return 0


def _load_config(args: argparse.Namespace):
    from loom_core.config import GenerationConfig
    from loom_core.errors import InvalidConfigError

    config = GenerationConfig.from_env(
        include_nullability_annotations=getattr(args, "jsr303", None),
        use_jakarta_validation=getattr(args, "jakarta", None),
        include_swagger2_annotations=getattr(args, "swagger2", None),
        use_primitives=getattr(args, "primitives", None),
        generate_builders=getattr(args, "builders", None),
        max_workers=getattr(args, "workers", None),
    )
    errors = config.get_validation_errors()
    if errors:
        raise InvalidConfigError("; ".join(errors))
    return config


def _cmd_generate(args: argparse.Namespace) -> int:
    """Generate classes and print them."""
    from loom_core.errors import InvalidConfigError, SchemaloomError
    from loom_core.schema import load_schema
    from loom_rules.batch import BatchGenerator, BatchResult
    from loom_rules.factory import RuleFactory

    if args.class_name and len(args.schemas) > 1:
        print("--class-name can only be used with a single schema", file=sys.stderr)
        return 2

    try:
        config = _load_config(args)
    except InvalidConfigError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    factory = RuleFactory(config)

    if args.class_name:
        path = args.schemas[0]
        result = BatchResult()
        try:
            schema = load_schema(path)
            result.classes[path] = factory.generate_class(
                schema, class_name=args.class_name, package=args.package
            )
        except SchemaloomError as e:
            logger.error(f"Failed to generate {path}: {e}")
            result.errors[path] = str(e)
    else:
        result = BatchGenerator(factory).generate(args.schemas, package=args.package)

    if args.json:
        _print_json(result)
    else:
        _print_text(result)

    return 0 if result.success else 1


def _print_json(result) -> None:
    from loom_cli.schemas import GenerateReport, class_report

    report = GenerateReport(
        classes=[class_report(c, source=path) for path, c in result.classes.items()],
        errors=result.errors,
    )
    print(report.model_dump_json(indent=2))


def _print_text(result) -> None:
    for path, generated in result.classes.items():
        print(f"\n[{generated.fqn}] ({path})")
        print("-" * 60)
        for f in generated.fields:
            annotations = " ".join(a.render() for a in f.annotations)
            prefix = f"{annotations} " if annotations else ""
            print(f"  {prefix}{f.type.simple_name} {f.name}")
            if f.javadoc:
                print(f"         {_one_line(f.javadoc.text)}")
        for m in generated.methods:
            print(f"  {m.signature}")
            if m.javadoc:
                print(f"         {_one_line(m.javadoc.text)}")

    for path, error in result.errors.items():
        print(f"[ERROR] {path}: {error}", file=sys.stderr)

    print(f"\nGenerated {len(result.classes)} class(es), {len(result.errors)} error(s)")


def _one_line(text: str) -> str:
    return " ".join(text.split())


def _cmd_rules(args: argparse.Namespace) -> int:
    """List pipeline rules."""
    from loom_rules.factory import RuleFactory

    pipeline = RuleFactory().create_pipeline()
    for index, rule in enumerate(pipeline.list_rules(), start=1):
        print(f"  {index}. {rule['keyword']:12} {rule['description']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
