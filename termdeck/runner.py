"""Execute slide code in a persistent Python interpreter."""

import code
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class CodeRunner:
    """One interpreter namespace shared by every snippet of a session."""

    def __init__(self, namespace: Optional[dict] = None):
        self.namespace = namespace if namespace is not None else {"__name__": "__slides__"}
        self._interpreter = code.InteractiveInterpreter(self.namespace)

    def run(self, source: str) -> bool:
        """Run `source`; errors are reported by the interpreter itself.

        Returns False when the snippet was incomplete and nothing ran.
        """
        logger.debug("Running %d lines of slide code", source.count("\n") + 1)
        incomplete = self._interpreter.runsource(source + "\n", "<slide>", "exec")
        if incomplete:
            logger.warning("Slide code is incomplete and was not run")
        return not incomplete
