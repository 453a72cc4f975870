from talenthub.store.memory import RecruitmentStore

__all__ = ["RecruitmentStore"]
