from .core import run_case, run_batch
from .io import write_results_csv, write_manifest

__all__ = ["run_case", "run_batch", "write_results_csv", "write_manifest"]
