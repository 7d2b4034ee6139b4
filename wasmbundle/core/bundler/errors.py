"""
Exceptions raised by the wasmbundle bundler
"""

from typing import Optional


class BundlerError(Exception):
    """Base class for every bundler pipeline failure"""


class FatalToolchainError(BundlerError):
    """A prerequisite is missing and nothing in the pipeline can fix it"""


class PackageManagerMissing(FatalToolchainError):
    """The package manager needed to install the bundler is not installed"""

    def __init__(self, package_manager: str, message: str):
        super().__init__(message)
        self.package_manager = package_manager


class ToolCommandError(BundlerError):
    """Spawning an external tool failed at the OS level"""

    def __init__(self, message: str, cause: Optional[OSError] = None):
        super().__init__(message)
        self.cause = cause


class InstallCommandError(ToolCommandError):
    pass


class PackageCommandError(ToolCommandError):
    pass


class PromptError(BundlerError):
    """The interactive confirmation itself failed"""


class InstallError(BundlerError):
    pass


class InstallDeclined(InstallError):
    """Bundler is missing and the user declined to install it"""


class InstallFailed(InstallError):
    """The package manager exited with a failure status"""

    def __init__(self, message: str, stderr: str = ""):
        super().__init__(message)
        self.stderr = stderr


class PackageFailed(BundlerError):
    """The bundler exited with a failure status"""

    def __init__(self, message: str, stderr: str = "", stdout: str = ""):
        super().__init__(message)
        self.stderr = stderr
        self.stdout = stdout


class ArtifactWriteError(BundlerError):
    """Writing one of the generated files failed"""

    artifact = "artifact"

    def __init__(self, path, cause: OSError):
        super().__init__(f"Cannot write {self.artifact} {path}: {cause}")
        self.path = path
        self.cause = cause


class JsIndexWriteError(ArtifactWriteError):
    artifact = "js index"


class HtmlIndexWriteError(ArtifactWriteError):
    artifact = "html index"


class InvalidPackagingRequest(BundlerError, ValueError):
    """Target name or output path cannot be packaged"""
