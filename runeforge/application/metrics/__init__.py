from .logger import METRICS_LOGGER_NAME, attach_metrics_file, detach_metrics_file

__all__ = ["METRICS_LOGGER_NAME", "attach_metrics_file", "detach_metrics_file"]
