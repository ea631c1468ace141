from repo_publisher import cli
from repo_publisher.errors import PushError
from repo_publisher.publisher import PublishResult


def _parse(argv):
    return cli.config_from_args(cli.build_arg_parser().parse_args(argv))


def test_private_flag_sets_visibility():
    assert _parse(["--private"]).visibility == "private"
    assert _parse([]).visibility == "public"


def test_flags_map_onto_config(tmp_path):
    config = _parse(
        [
            "--owner",
            "alice",
            "--repo-name",
            "demo",
            "-C",
            str(tmp_path),
            "--force",
            "--no-gh",
            "--branch",
            "trunk",
            "-vv",
            "-q",
        ]
    )

    assert config.owner == "alice"
    assert config.repo_name == "demo"
    assert config.path == str(tmp_path)
    assert config.force is True
    assert config.use_gh is False
    assert config.branch == "trunk"
    assert config.verbosity == 1


def test_main_returns_zero_on_success(monkeypatch):
    monkeypatch.setattr(
        "repo_publisher.cli.publish_repository",
        lambda config: PublishResult(strategy="gh", url="https://github.com/alice/demo"),
    )

    assert cli.main(["--owner", "alice"]) == 0


def test_main_reports_errors_on_stderr(monkeypatch, capsys):
    def failing(config):
        raise PushError("push to https://github.com/alice/demo.git failed")

    monkeypatch.setattr("repo_publisher.cli.publish_repository", failing)

    assert cli.main(["--owner", "alice"]) == 1
    assert "repo-publisher: error: push to https://github.com/alice/demo.git failed" in (
        capsys.readouterr().err
    )


def test_main_returns_130_on_interrupt(monkeypatch):
    def interrupted(config):
        raise KeyboardInterrupt

    monkeypatch.setattr("repo_publisher.cli.publish_repository", interrupted)

    assert cli.main([]) == 130


def test_missing_directory_is_reported_as_such(tmp_path, capsys):
    missing = tmp_path / "nope"

    assert cli.main(["--owner", "alice", "-C", str(missing)]) == 1

    err = capsys.readouterr().err
    assert "is not a directory" in err
    assert "git is not usable" not in err


def test_success_leaves_reporting_to_the_publisher(monkeypatch, caplog):
    monkeypatch.setattr(
        "repo_publisher.cli.publish_repository",
        lambda config: PublishResult(strategy="gh", url="https://github.com/alice/demo"),
    )

    with caplog.at_level("INFO"):
        assert cli.main(["--owner", "alice"]) == 0

    assert not [r for r in caplog.records if r.name == "repo_publisher.cli"]
