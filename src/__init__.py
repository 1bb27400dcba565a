"""
reloaded - Inline directive text post-processor

Turns annotated drafts like "1E (hex) files were added ." into clean text.
"""

__version__ = "1.0.0"

from .lib import Processor, text_process, DirectiveRegistry, LOG, state_connectToLogger

__all__ = ["Processor", "text_process", "DirectiveRegistry", "LOG", "state_connectToLogger", "__version__"]
