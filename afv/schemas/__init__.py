from afv.schemas.evaluation import (
    EvaluationIn,
    EvaluationOut,
    SummaryRowOut,
    ToleranceMatrixOut,
    FormOptionsOut,
)
__all__ = [
    "EvaluationIn",
    "EvaluationOut",
    "SummaryRowOut",
    "ToleranceMatrixOut",
    "FormOptionsOut",
]
