"""Terminal styling, rust-project.json generation and worked Rust exercise solutions."""

__version__ = "5.2.1"