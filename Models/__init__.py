from Models.Errors import DiscoveryFailure, ExtractionFailure, FetchFailure, ScraperError
from Models.Form import ARRAY_TEXT_FIELD, FormDescriptor, SubmissionResult

__all__ = [
    "ARRAY_TEXT_FIELD",
    "DiscoveryFailure",
    "ExtractionFailure",
    "FetchFailure",
    "FormDescriptor",
    "ScraperError",
    "SubmissionResult",
]
