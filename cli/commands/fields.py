"""Fields command - list recognised option fields."""

from cli.utils.formatting import FormatOption, OutputFormat, output_list
from modifiers import get_available_fields
from modifiers.base import format_value


def fields_command(format: OutputFormat = FormatOption):
    """List recognised option fields in token order."""

    def build_json(spec):
        return {
            "key": spec.key,
            "attribute": spec.attribute,
            "prefix": spec.prefix,
        }

    def build_row(spec):
        formatter = "-" if spec.formatter is format_value else spec.formatter.__name__
        return [spec.key, spec.attribute, spec.prefix, formatter]

    output_list(
        items=get_available_fields(),
        format=format,
        table_title="Recognised Fields",
        columns=[
            ("Key", "cyan", True),
            ("Attribute", "white"),
            ("Prefix", "green"),
            ("Formatter", "yellow"),
        ],
        row_builder=build_row,
        json_builder=build_json,
    )
