from genetic.select.tournament import TournamentSelection

__all__ = ["TournamentSelection"]
