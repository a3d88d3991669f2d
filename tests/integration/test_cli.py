"""Integration tests for the pyterraform command line."""

from unittest.mock import patch

import pytest

from pyterraform.cli import create_parser, main


def run_cli(fake_terraform, work_dir, *argv):
    return main(["--binary", str(fake_terraform), "--work-dir", str(work_dir), *argv])


@pytest.mark.integration
class TestParser:
    def test_subcommands_registered(self):
        parser = create_parser()

        args = parser.parse_args(["import", "aws_instance.web", "i-123"])
        assert args.command == "import"
        assert args.addr == "aws_instance.web"
        assert args.resource_id == "i-123"

    def test_repeatable_options(self):
        args = create_parser().parse_args(
            ["plan", "--var", "a=1", "--var", "b=2", "--target", "x.y", "plan.out"]
        )

        assert args.var == ["a=1", "b=2"]
        assert args.target == ["x.y"]
        assert args.positional == "plan.out"

    def test_no_command_prints_help(self, isolated_config, capsys):
        assert main([]) == 1
        assert "Usage:" in capsys.readouterr().out


@pytest.mark.integration
class TestPlanCommand:
    def test_plan_passes_options(self, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = run_cli(
            fake_terraform, work_dir, "plan", "--var", "region=eu-west-1", "--var-file", "prod.tfvars"
        )

        assert exit_code == 0
        assert capsys.readouterr().out == "plan -var region=eu-west-1 -var-file=prod.tfvars\n"

    def test_plan_with_positional_and_no_color(self, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = main(
            [
                "--no-color",
                "--binary",
                str(fake_terraform),
                "--work-dir",
                str(work_dir),
                "plan",
                "--flag",
                "lock",
                "saved.plan",
            ]
        )

        assert exit_code == 0
        assert capsys.readouterr().out == "plan -lock -no-color saved.plan\n"

    def test_config_vars_are_merged(self, isolated_config, fake_terraform, work_dir, capsys):
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.yaml").write_text(
            f"terraform_binary: {fake_terraform}\nwork_dir: {work_dir}\nvars:\n  region: eu-west-1\n"
        )

        exit_code = main(["plan", "--var", "env=dev"])

        assert exit_code == 0
        assert capsys.readouterr().out == "plan -var region=eu-west-1 -var env=dev\n"

    def test_failure_exit_code(self, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = run_cli(fake_terraform, work_dir, "plan", "--flag", "fail")

        captured = capsys.readouterr()
        assert exit_code == 1
        assert "Error: boom" in captured.err
        assert "terraform plan failed" in captured.err

    def test_bad_var_argument(self, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = run_cli(fake_terraform, work_dir, "plan", "--var", "novalue")

        assert exit_code == 1
        assert "Expected KEY=VALUE" in capsys.readouterr().err


@pytest.mark.integration
class TestApplyDestroyCommands:
    def test_apply_auto_approve(self, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = run_cli(fake_terraform, work_dir, "apply", "--auto-approve")

        out = capsys.readouterr().out
        assert exit_code == 0
        assert "apply -auto-approve\n" in out
        assert "applied successfully" in out

    @patch("pyterraform.commands.handlers.ask_confirmation", return_value=False)
    def test_destroy_cancelled(self, mock_confirm, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = run_cli(fake_terraform, work_dir, "destroy")

        assert exit_code == 0
        assert mock_confirm.called
        out = capsys.readouterr().out
        assert "Destroy cancelled" in out
        assert "destroy -auto-approve" not in out

    @patch("pyterraform.commands.handlers.ask_confirmation", return_value=True)
    def test_apply_confirmed(self, mock_confirm, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = run_cli(fake_terraform, work_dir, "apply", "--target", "a.b")

        assert exit_code == 0
        assert "apply -target=a.b -auto-approve\n" in capsys.readouterr().out


@pytest.mark.integration
class TestOtherCommands:
    def test_import(self, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = run_cli(fake_terraform, work_dir, "import", "aws_instance.web", "i-123")

        assert exit_code == 0
        assert "import aws_instance.web i-123\n" in capsys.readouterr().out

    def test_output_prints_only_terraform_output(self, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = run_cli(fake_terraform, work_dir, "output", "--flag", "json", "bucket")

        assert exit_code == 0
        assert capsys.readouterr().out == "output -json bucket\n"

    def test_quiet_suppresses_success_message(self, isolated_config, fake_terraform, work_dir, capsys):
        exit_code = main(
            ["--quiet", "--binary", str(fake_terraform), "--work-dir", str(work_dir), "init"]
        )

        assert exit_code == 0
        assert capsys.readouterr().out == "init\n"

    def test_version(self, isolated_config, fake_terraform, work_dir, capsys):
        assert run_cli(fake_terraform, work_dir, "version") == 0
        assert capsys.readouterr().out == "0.8.5\n"


@pytest.mark.integration
class TestDryRun:
    def test_dry_run_does_not_execute(self, isolated_config, work_dir, capsys):
        with patch("pyterraform.process.subprocess.Popen") as mock_popen:
            exit_code = main(
                ["--dry-run", "--work-dir", str(work_dir), "destroy", "--target", "a.b"]
            )

        out = capsys.readouterr().out
        assert exit_code == 0
        assert not mock_popen.called
        assert "DRY RUN: Run terraform destroy -target=a.b" in out
        assert f"working_directory: {work_dir}" in out

    def test_dry_run_version(self, isolated_config, capsys):
        with patch("pyterraform.process.subprocess.Popen") as mock_popen:
            exit_code = main(["--dry-run", "version"])

        assert exit_code == 0
        assert not mock_popen.called
        assert "DRY RUN: Run terraform version" in capsys.readouterr().out


@pytest.mark.integration
class TestConfigErrors:
    def test_invalid_config_exit_code(self, isolated_config, capsys):
        isolated_config.mkdir(parents=True)
        (isolated_config / "config.yaml").write_text("vars: [unclosed\n")

        assert main(["init"]) == 2
        assert "Failed to load configuration" in capsys.readouterr().err

    def test_missing_explicit_config(self, isolated_config, tmp_path, capsys):
        assert main(["--config", str(tmp_path / "nope.yaml"), "init"]) == 2
