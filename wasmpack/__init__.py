"""Tool management, wasm-bindgen driving and project generation for Rust-generated WebAssembly."""

__version__ = "0.8.1"