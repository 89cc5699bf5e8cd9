"""
Unit tests for the docker-container command line.
"""

from unittest.mock import patch

import pytest
from docker.errors import APIError

from docker_container import __version__
from docker_container.cli import main


def test_version(capsys):
    assert main(["version"]) == 0
    assert __version__ in capsys.readouterr().out


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "usage" in capsys.readouterr().out


@patch("docker_container.cli.DockerContainer")
def test_pull_reports_pull(container_cls, capsys):
    container_cls.return_value.pull_if_needed.return_value = True

    assert main(["pull", "nginx:alpine"]) == 0

    container_cls.return_value.pull_if_needed.assert_called_once_with()
    assert "Pulled nginx:alpine" in capsys.readouterr().out


@patch("docker_container.cli.DockerContainer")
def test_pull_reports_present_image(container_cls, capsys):
    container_cls.return_value.pull_if_needed.return_value = False

    assert main(["pull", "nginx:alpine"]) == 0

    assert "already present" in capsys.readouterr().out


@patch("docker_container.cli.DockerContainer")
def test_run_translates_flags(container_cls, capsys):
    instance = container_cls.return_value
    instance.run.return_value.id = "0123456789ab"

    code = main([
        "run", "nginx:alpine", "web",
        "--port", "80:8080",
        "--port", "443:8443",
        "--env", "A=b=c",
        "--link", "db:database",
        "--volume", "/srv/site:/usr/share/nginx/html",
    ])

    assert code == 0
    container_cls.assert_called_once_with("nginx:alpine", "web")
    instance.pull_if_needed.assert_called_once_with()
    options = instance.run.call_args[0][0]
    assert [(p.from_, p.to) for p in options.ports] == [(80, 8080), (443, 8443)]
    assert options.env == {"A": "b=c"}
    assert options.links == {"db": "database"}
    assert options.volumes == {"/usr/share/nginx/html": "/srv/site"}
    assert "0123456789ab" in capsys.readouterr().out


@patch("docker_container.cli.DockerContainer")
def test_run_without_pull(container_cls):
    instance = container_cls.return_value
    instance.run.return_value.id = "0123456789ab"

    assert main(["run", "nginx:alpine", "web", "--no-pull"]) == 0

    instance.pull_if_needed.assert_not_called()
    options = instance.run.call_args[0][0]
    assert options.ports is None and options.env is None


@pytest.mark.parametrize("flags", [
    ["--port", "8080"],
    ["--port", "80:http"],
    ["--env", "NOVALUE"],
    ["--link", "db"],
    ["--volume", ":/data"],
])
@patch("docker_container.cli.DockerContainer")
def test_run_rejects_malformed_flags(container_cls, flags):
    with pytest.raises(SystemExit) as exc_info:
        main(["run", "nginx:alpine", "web", *flags])

    assert exc_info.value.code == 2
    container_cls.return_value.run.assert_not_called()


@patch("docker_container.cli.DockerContainer")
def test_daemon_errors_exit_non_zero(container_cls, capsys):
    container_cls.return_value.run.side_effect = APIError("Conflict. The container name is already in use")

    assert main(["run", "nginx:alpine", "web", "--no-pull"]) == 1

    assert "Conflict" in capsys.readouterr().err
