from .collaborators import OcrEngine, StudyAidGenerator, Translator

__all__ = ["OcrEngine", "StudyAidGenerator", "Translator"]
