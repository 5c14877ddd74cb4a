from genetic.reinsert.elitist import ElitistReinserter

__all__ = ["ElitistReinserter"]
