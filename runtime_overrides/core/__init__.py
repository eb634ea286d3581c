"""Build pipeline: source acquisition, toolchain, relocation, digest."""
