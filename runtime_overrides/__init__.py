"""runtime-overrides: build EVM-tracing runtime overrides for Darwinia chains.

Clones the chain's source, builds the runtime with the ``evm-tracing``
feature, and files the compressed wasm and its runtime digest under
``overridden-runtimes/<chain>/``.
"""

__version__ = "0.1.0"

from runtime_overrides.core.builder import OverrideBuilder
from runtime_overrides.models.build import BuildRequest, OutputPaths
from runtime_overrides.models.runtimes import Runtime

__all__ = ["OverrideBuilder", "BuildRequest", "OutputPaths", "Runtime", "__version__"]
