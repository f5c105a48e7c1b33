from .resume_analysis import build_prompt

__all__ = ["build_prompt"]
