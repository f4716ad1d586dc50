from .io_utils import read_monthly_csv, report_from_frame, report_to_frame

__all__ = ['read_monthly_csv', 'report_from_frame', 'report_to_frame']
