from sqlalchemy import Column, DateTime, Index, Integer, JSON, String, Text

from .base import Base


class AnalysisHistory(Base):
    """
    One completed ATS analysis, flattened for storage.

    Rows are written once and deleted by their owner; never updated.
    """
    __tablename__ = "ats_analysis_history"

    id = Column(String(32), primary_key=True)
    user_id = Column(String(128), nullable=False, index=True)
    job_title = Column(String(255), nullable=True)
    company = Column(String(255), nullable=True)
    resume_text = Column(Text, nullable=True)
    resume_url = Column(String(1024), nullable=True)

    # Scores (0-100)
    overall_score = Column(Integer, nullable=False)
    skills_score = Column(Integer, nullable=False)
    experience_score = Column(Integer, nullable=False)
    format_score = Column(Integer, nullable=False)
    keywords_score = Column(Integer, nullable=False)

    # JSON lists
    suggestions = Column(JSON, nullable=False, default=list)
    strong_points = Column(JSON, nullable=False, default=list)
    missing_keywords = Column(JSON, nullable=False, default=list)
    matched_keywords = Column(JSON, nullable=False, default=list)
    recommendations = Column(JSON, nullable=False, default=list)

    analyzed_at = Column(DateTime(timezone=True), nullable=False, index=True)

    __table_args__ = (
        Index("idx_ats_history_user_time", "user_id", "analyzed_at"),
    )

    def __repr__(self):
        return f"<AnalysisHistory(id={self.id}, user_id={self.user_id}, overall_score={self.overall_score})>"
