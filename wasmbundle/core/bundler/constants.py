"""
Constants and default values for the wasmbundle bundler
"""

# Tool names
PACKAGE_MANAGER_NAME = "yarn"
BUNDLER_NAME = "webpack"
BUNDLER_CLI_NAME = "webpack-cli"

# Windows can only run batch scripts through the command interpreter
WINDOWS_PLATFORM = "win32"
WINDOWS_SHELL = "cmd"
WINDOWS_SHELL_FLAG = "/k"
WINDOWS_SCRIPT_SUFFIX = ".cmd"

VERSION_FLAG = "-v"

# Generated artifacts
JS_INDEX_FILE = "index.js"
ENTRY_FUNCTION = "web_main"

# Build configuration
BUILD_MODES = {"development", "production", "none"}
DEFAULT_BUILD_MODE = "development"

# Global install arguments and download page per supported package manager
PACKAGE_MANAGERS = {
    "yarn": {"global_install": ["global", "add"], "url": "https://yarnpkg.com/"},
    "npm": {"global_install": ["install", "-g"], "url": "https://docs.npmjs.com/downloading-and-installing-node-js-and-npm"},
    "pnpm": {"global_install": ["add", "-g"], "url": "https://pnpm.io/installation"},
}

# User facing messages
PACKAGE_MANAGER_MISSING = (
    "No installation of {package_manager} found. {package_manager} is required "
    "to install {bundler}. {url}"
)
BUNDLER_INSTALL_PROMPT = (
    "No installation of {bundler} found. Do you want to install {bundler}?"
)

# Logging format
LOG_FORMAT = "[wasmbundle] %(levelname)s: %(message)s"
