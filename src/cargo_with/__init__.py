"""cargo-with - run cargo build artifacts through tools like gdb."""

__version__ = "0.3.0"
