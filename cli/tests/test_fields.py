"""Tests for the 'mediamod fields' command."""

import json

from cli.cli import app
from modifiers import FIELD_TABLE


class TestFieldsCommand:
    """Tests for listing recognised fields."""

    def test_json_lists_every_field_in_order(self, runner):
        result = runner.invoke(app, ["fields", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert [item["key"] for item in data] == [spec.key for spec in FIELD_TABLE]
        assert {"key": "bitRate", "attribute": "bit_rate", "prefix": "br"} in data

    def test_table(self, runner):
        result = runner.invoke(app, ["fields"])

        assert result.exit_code == 0
        assert "Recognised Fields" in result.stdout
        assert "aspectRatio" in result.stdout
