"""Unit tests for the ImageBuilder docker operations."""

import subprocess
from unittest.mock import Mock, patch

import pytest

from git_docker_build.exceptions import ExternalToolError
from git_docker_build.io_layer import ImageBuilder


class TestImageBuilder:
    """Test docker command construction and error handling."""

    @pytest.fixture
    def mock_run(self):
        """Patch subprocess.run in the I/O layer."""
        with patch("git_docker_build.io_layer.subprocess.run") as mock_run:
            mock_run.return_value = Mock(stdout="", returncode=0)
            yield mock_run

    @pytest.fixture
    def builder(self):
        """Create an ImageBuilder performing real (mocked) calls."""
        return ImageBuilder()

    def test_build_command(self, builder, mock_run):
        """Test that one build carries all tags, labels and build args."""
        built = builder.build(
            tags=["reg/app:abc", "reg/app:master"],
            labels={"org.label-schema.schema-version": "1.0", "maintainer": "Jane Doe <jane@example.com>"},
            build_args=["HTTP_PROXY", "VERSION=1.0"],
            dockerfile="/src/Dockerfile",
            context="/src",
            pull=True,
            force_remove_and_no_cache=True,
        )

        assert built is True
        mock_run.assert_called_once()
        command = mock_run.call_args[0][0]
        assert command == [
            "docker", "build", "--pull", "--force-rm", "--no-cache",
            "--label", "org.label-schema.schema-version=1.0",
            "--label", "maintainer=Jane Doe <jane@example.com>",
            "--tag", "reg/app:abc",
            "--tag", "reg/app:master",
            "--build-arg", "HTTP_PROXY",
            "--build-arg", "VERSION=1.0",
            "--file", "/src/Dockerfile", "/src",
        ]
        assert mock_run.call_args.kwargs["check"] is True

    def test_build_without_optional_flags(self, builder, mock_run):
        """Test that pull and cache flags are omitted by default."""
        builder.build(["app:1"], {}, [], "Dockerfile", ".")

        command = mock_run.call_args[0][0]
        assert "--pull" not in command
        assert "--no-cache" not in command
        assert "--force-rm" not in command

    def test_login_passes_password_on_stdin(self, builder, mock_run):
        """Test that the password never appears in the command line."""
        builder.login("user", "s3cret", "docker.52north.org")

        command = mock_run.call_args[0][0]
        assert command == ["docker", "login", "--username", "user", "--password-stdin", "docker.52north.org"]
        assert "s3cret" not in command
        assert mock_run.call_args.kwargs["input"] == "s3cret"

    def test_push(self, builder, mock_run):
        """Test pushing a single reference."""
        builder.push("reg/app:1.0")
        assert mock_run.call_args[0][0] == ["docker", "push", "reg/app:1.0"]

    def test_push_repository(self, builder, mock_run):
        """Test pushing all tags of a repository."""
        builder.push_repository("reg/app")
        assert mock_run.call_args[0][0] == ["docker", "push", "--all-tags", "reg/app"]

    def test_count_local_tags(self, builder, mock_run):
        """Test counting tags, ignoring untagged images."""
        mock_run.return_value = Mock(stdout="1.0\nlatest\n<none>\n\n", returncode=0)

        assert builder.count_local_tags("reg/app") == 2
        assert mock_run.call_args[0][0] == ["docker", "image", "ls", "--format", "{{.Tag}}", "reg/app"]

    def test_remove(self, builder, mock_run):
        """Test removing image references in one call."""
        builder.remove(["reg/app:1", "reg/app:2"])
        assert mock_run.call_args[0][0] == ["docker", "rmi", "reg/app:1", "reg/app:2"]

    def test_remove_nothing(self, builder, mock_run):
        """Test that an empty removal does not call docker."""
        assert builder.remove([]) is False
        mock_run.assert_not_called()

    def test_command_failure_raises(self, builder, mock_run):
        """Test that a failing command raises ExternalToolError with its output."""
        mock_run.side_effect = subprocess.CalledProcessError(
            1, ["docker", "push", "reg/app:1"], stderr="denied: requested access to the resource is denied"
        )

        with pytest.raises(ExternalToolError) as exc_info:
            builder.push("reg/app:1")

        assert "denied" in str(exc_info.value)
        assert exc_info.value.command == ["docker", "push", "reg/app:1"]

    def test_missing_executable_raises(self, mock_run):
        """Test that a missing docker binary raises ExternalToolError."""
        mock_run.side_effect = FileNotFoundError("podman-docker")

        with pytest.raises(ExternalToolError, match="not found"):
            ImageBuilder(docker="/opt/missing/docker").push("app:1")


class TestDryRun:
    """Test that dry run performs no docker calls."""

    def test_no_calls(self, capsys):
        """Test every operation in dry run mode."""
        builder = ImageBuilder(dry_run=True)

        with patch("git_docker_build.io_layer.subprocess.run") as mock_run:
            assert builder.build(["app:1"], {}, [], "Dockerfile", ".") is False
            assert builder.login("user", "s3cret", "reg") is False
            assert builder.push("app:1") is False
            assert builder.push_repository("app") is False
            assert builder.count_local_tags("app") == 0
            assert builder.remove(["app:1"]) is False

        mock_run.assert_not_called()
        output = capsys.readouterr().out
        assert "[DRY RUN] Would run: docker build" in output
        assert "s3cret" not in output
