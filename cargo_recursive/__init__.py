"""
cargo-recursive: run a command in every Cargo project below a directory.
"""
