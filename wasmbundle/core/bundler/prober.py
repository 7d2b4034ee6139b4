"""
Tool availability probing
"""

import subprocess
import logging
from enum import Enum
from dataclasses import dataclass
from typing import Optional

from .constants import VERSION_FLAG
from .toolchain import ToolName, ToolchainConfig, CommandResolver

logger = logging.getLogger(__name__)


class ProbeStatus(Enum):
    PRESENT = "present"
    ABSENT = "absent"
    ERROR = "error"


@dataclass
class ProbeResult:
    """Outcome of probing a single tool"""
    tool: ToolName
    status: ProbeStatus
    error: Optional[OSError] = None


class ToolProber:
    """Checks whether external tools can be spawned"""

    def __init__(self, config: Optional[ToolchainConfig] = None):
        self.config = config or ToolchainConfig.from_env()
        self.resolver = CommandResolver(self.config)

    def probe(self, tool: ToolName) -> ProbeResult:
        """
        Run `<tool> -v` and classify the outcome

        The bare executable is spawned without the Windows shell wrapper. On
        Windows this cannot run the batch script properly, but it still
        raises FileNotFoundError when the tool is missing, which is all
        the probe needs. The tool's own exit status is ignored.

        Args:
            tool: Tool to probe

        Returns:
            ProbeResult with PRESENT, ABSENT or ERROR status
        """
        executable = self.resolver.executable(tool)

        try:
            subprocess.run(
                [executable, VERSION_FLAG],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except FileNotFoundError:
            logger.debug(f"{executable} not found")
            return ProbeResult(tool, ProbeStatus.ABSENT)
        except OSError as e:
            logger.error(f"Failed to run {executable}: {e}")
            return ProbeResult(tool, ProbeStatus.ERROR, e)

        logger.debug(f"{executable} is available")
        return ProbeResult(tool, ProbeStatus.PRESENT)
