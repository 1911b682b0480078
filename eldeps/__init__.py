"""eldeps: report byte-compilation dependencies between Emacs Lisp files."""

__version__ = "0.1.0"
