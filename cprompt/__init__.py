# Copyright (c) 2026 CPrompt Contributors. All Rights Reserved.

"""
cprompt — Shell prompt renderer.

The prompt is a fixed sequence of elements declared in
``cprompt.user_config``. Each element is resolved to text when the
program runs and the pieces are printed as a single line.
"""

__version__ = "0.1.0"
