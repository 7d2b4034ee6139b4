"""
Tests for BundlerPackager and the build pipeline
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import patch, MagicMock

import pytest

from .. import build, PackagingRequest
from ..errors import (
    PackageFailed, PackageCommandError, InvalidPackagingRequest,
    InstallDeclined, PackageManagerMissing
)
from ..packager import BundlerPackager, package_bin
from .fakes import FakeProcesses, make_config


class TestBundlerPackager:

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.build_dir = self.temp_dir / "build"
        self.build_dir.mkdir()
        self.module_path = self.build_dir / "placeholder"
        self.packager = BundlerPackager(make_config())

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def test_package_bin_success(self, capsys):
        fake = FakeProcesses()

        with patch("subprocess.run", fake):
            out_file = self.packager.package_bin("foo", self.module_path)

        assert out_file == self.temp_dir / "foo.js"
        assert out_file.exists()
        assert (self.build_dir / "index.js").exists()

        html = (self.temp_dir / "foo.html").read_text(encoding="utf-8")
        assert "<script src='./foo.js'>" in html

        assert fake.calls == [[
            "webpack", str(self.build_dir / "index.js"),
            "--output", str(self.temp_dir / "foo.js"),
            "--mode", "development",
        ]]
        assert "webpack compiled successfully" in capsys.readouterr().out

    def test_mode_is_configurable(self):
        fake = FakeProcesses()
        packager = BundlerPackager(make_config(mode="production"))

        with patch("subprocess.run", fake):
            packager.package_bin("foo", self.module_path)

        assert fake.calls[0][-2:] == ["--mode", "production"]

    def test_windows_goes_through_cmd(self):
        fake = FakeProcesses()
        packager = BundlerPackager(make_config("win32"))

        with patch("subprocess.run", fake):
            packager.package_bin("foo", self.module_path)

        assert fake.calls[0][:3] == ["cmd", "/k", "webpack.cmd"]

    def test_failed_bundle_skips_host_page(self):
        fake = FakeProcesses(bundle_returncode=2, stderr=b"Module not found",
                             failure_stdout=b"ERROR in ./index.js")

        with patch("subprocess.run", fake):
            with pytest.raises(PackageFailed) as exc_info:
                self.packager.package_bin("foo", self.module_path)

        assert exc_info.value.stderr == "Module not found"
        assert exc_info.value.stdout == "ERROR in ./index.js"
        assert not (self.temp_dir / "foo.html").exists()

    def test_spawn_failure(self):
        with patch("subprocess.run", side_effect=FileNotFoundError("webpack")):
            with pytest.raises(PackageCommandError) as exc_info:
                self.packager.package_bin("foo", self.module_path)

        assert isinstance(exc_info.value.cause, FileNotFoundError)
        assert not (self.temp_dir / "foo.html").exists()

    def test_missing_build_dir(self):
        with pytest.raises(InvalidPackagingRequest):
            self.packager.package_bin("foo", self.temp_dir / "nope" / "placeholder")

    def test_module_level_helper(self):
        with patch("subprocess.run", FakeProcesses()):
            out_file = package_bin("foo", self.module_path, config=make_config())

        assert out_file.name == "foo.js"


class TestBuild:

    def setup_method(self):
        self.temp_dir = Path(tempfile.mkdtemp())
        self.build_dir = self.temp_dir / "build"
        self.build_dir.mkdir()
        self.module_path = self.build_dir / "app"

    def teardown_method(self):
        shutil.rmtree(self.temp_dir)

    def test_build_installs_then_packages(self):
        fake = FakeProcesses(missing={"webpack"})

        # webpack only becomes available after installation
        def run(cmd, **kwargs):
            if cmd[:3] == ["yarn", "global", "add"]:
                fake.missing.discard("webpack")
            return fake(cmd, **kwargs)

        with patch("subprocess.run", side_effect=run):
            result = build("app", self.module_path, skip_prompt=True, config=make_config())

        assert result.bundle_path == self.temp_dir / "app.js"
        assert result.html_path == self.temp_dir / "app.html"
        assert result.html_path.exists()
        assert fake.calls[2] == ["yarn", "global", "add", "webpack", "webpack-cli"]

    def test_build_stops_when_install_declined(self):
        fake = FakeProcesses(missing={"webpack"})
        confirm = MagicMock(return_value=False)

        with patch("subprocess.run", fake):
            with pytest.raises(InstallDeclined):
                build("app", self.module_path, config=make_config(), confirm=confirm)

        assert not (self.build_dir / "index.js").exists()

    def test_build_without_package_manager(self):
        with patch("subprocess.run", FakeProcesses(missing={"yarn"})):
            with pytest.raises(PackageManagerMissing):
                build("app", self.module_path, config=make_config())

    def test_request_validation(self):
        with pytest.raises(InvalidPackagingRequest):
            PackagingRequest("a/b", self.module_path)
        with pytest.raises(InvalidPackagingRequest):
            PackagingRequest("app", self.temp_dir / "missing" / "app")
