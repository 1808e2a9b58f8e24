"""lilacstat: incremental build-log publisher for the lilac status dashboard.

Each invocation:
  - collects maintainers from every package's lilac.yaml
  - folds the lilac build log into per-package build summaries
  - renders terminal captures newer than the watermark into HTML pages
  - publishes the joined summaries as a JSON index
"""

__version__ = "0.1.0"
__description__ = "Incremental build-log publisher for the lilac status dashboard"

from lilacstat.core.pipeline import StatusPipeline

__all__ = ["StatusPipeline", "__version__"]
