"""Test the pattern-demos CLI."""
import json

from typer.testing import CliRunner

from cli.main import app

runner = CliRunner()


def test_list_json():
    result = runner.invoke(app, ["list", "--json"])
    assert result.exit_code == 0
    rows = json.loads(result.stdout)
    assert {"pattern": "singleton", "variant": "with"}.items() <= rows[1].items()
    assert len(rows) == 16


def test_list_filtered_json():
    result = runner.invoke(app, ["list", "--pattern", "factory_method", "--json"])
    rows = json.loads(result.stdout)
    assert [r["variant"] for r in rows] == ["with"]


def test_run_both_variants():
    result = runner.invoke(app, ["run", "singleton"])
    assert result.exit_code == 0
    assert "=== WITHOUT SINGLETON ===" in result.stdout
    assert "=== WITH SINGLETON ===" in result.stdout


def test_run_with_options():
    result = runner.invoke(
        app, ["run", "abstract_factory", "--region", "usa", "--channel", "email"]
    )
    assert result.exit_code == 0
    assert "[USAEmail] Sent Email OTP: 847291" in result.stdout


def test_run_prompts_for_missing_input():
    result = runner.invoke(app, ["run", "simple_factory", "--variant", "with"], input="whatsapp\n")
    assert result.exit_code == 0
    assert "[WhatsAppOTP] Sent OTP: 847291" in result.stdout


def test_run_invalid_selector_exits_1():
    result = runner.invoke(
        app, ["run", "simple_factory", "--variant", "with", "--channel", "fax"]
    )
    assert result.exit_code == 1
    assert "Unknown: fax" in result.stdout


def test_run_unknown_pattern():
    result = runner.invoke(app, ["run", "visitor"])
    assert result.exit_code == 1
    assert "Unknown pattern: visitor" in result.stdout


def test_run_missing_variant():
    result = runner.invoke(app, ["run", "factory_method", "--variant", "without"])
    assert result.exit_code == 1
    assert "no 'without' variant" in result.stdout


def test_show_unknown_pattern():
    result = runner.invoke(app, ["show", "visitor"])
    assert result.exit_code == 1
    assert "Unknown pattern: visitor" in result.stdout


def test_show():
    result = runner.invoke(app, ["show", "decorator"])
    assert result.exit_code == 0
    assert "Stacked mixer decorators" in result.stdout


def test_run_all():
    result = runner.invoke(app, ["run-all"])
    assert result.exit_code == 0
    assert "Transitions:" in result.stdout
