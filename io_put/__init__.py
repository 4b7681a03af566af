from .dataclass_output import DataConverterFacade
from .analyzer_result_saver import save_analyzer_result_to_json, format_tfidf_report

__all__ = [
    "DataConverterFacade", "save_analyzer_result_to_json", "format_tfidf_report"
]
