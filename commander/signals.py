# Commander CLI Toolkit — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used by Commander.

Signals interrupt or redirect command dispatch without being treated as
traditional exceptions. They inherit from `FlowSignal`, a subclass of
`BaseException`, so they bypass standard `except Exception` blocks.

Signals:
- HelpSignal: Stop dispatching and show usage instead.
"""


class FlowSignal(BaseException):
    """Base class for all flow control signals in Commander.

    These are not errors. They redirect control to the outer driver, which
    treats them as a successful outcome.
    """


class HelpSignal(FlowSignal):
    """Raised to display help information."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
