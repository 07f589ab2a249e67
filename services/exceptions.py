class ResumeAnalysisException(Exception):
    """Base class for errors raised by the analysis pipeline"""


class ValidationError(ResumeAnalysisException):
    """Input is missing or too short to analyze"""


class AnalysisError(ResumeAnalysisException):
    """Unexpected failure while running the pipeline"""
