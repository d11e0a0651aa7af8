from .pipeline import PipelineError, PipelineOutput, SolverPipeline

__all__ = [
    "SolverPipeline",
    "PipelineOutput",
    "PipelineError",
]
