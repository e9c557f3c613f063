"""Services package for the scrape pipeline."""

from .pipeline import RunState, run, collect_course_files, assemble_report

__all__ = ['RunState', 'run', 'collect_course_files', 'assemble_report']
