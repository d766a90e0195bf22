"""
Core building blocks shared by every layer.

Pure policies (``dates``, ``validation``), the error taxonomy
(``exceptions``) and the process plumbing (``config``,
``logging_config``, ``db``, ``middleware``).
"""
