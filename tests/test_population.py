from concurrent.futures import ThreadPoolExecutor

from conftest import FRUITS
import pytest

from genetic.exceptions import FitnessError, GrowthError, PopulationStateError
from genetic.fitness import ParetoFitness, ParetoFitnessFunction, SimpleFitness
from genetic.incubators import FunctionIncubator, IdentityIncubator
from genetic.individual import Individual
from genetic.population import Population, SortedPopulation, UnsortedPopulation
from genetic.types import FitnessFunction

GENOMES = [71, 912, 9, 1231, 22, 71, 918, 15, 991]


@pytest.fixture
def string_incubator():
    return FunctionIncubator(lambda g: "x" * g)


@pytest.fixture
def double_length():
    return SimpleFitness(lambda phenotype: len(phenotype) * 2).use_existing_fitness()


class ListFitness(FitnessFunction):
    """Returns a canned list regardless of input."""

    def __init__(self, values):
        self.values = values

    def evaluate(self, phenotypes_with_fitnesses):
        return list(self.values)


def test_empty_population():
    population = Population.empty()
    assert isinstance(population, UnsortedPopulation)
    assert len(population) == 0
    assert population.generation == 0
    assert population.num_children == 0
    assert population.previous_generation_size == 0


def test_sort_by_fruit_name_length():
    incubator = FunctionIncubator(lambda index: FRUITS[index])
    fitness = SimpleFitness(len).use_existing_fitness()

    population = Population.empty().add_children([5, 3, 2, 4, 1]).sort(incubator, fitness)

    assert population.fitnesses() == [8, 7, 6, 5, 5]
    assert population.best().genome == 3
    # equal fitness keeps insertion order
    assert population.genomes()[-2:] == [2, 4]


def test_sort_nine_values(string_incubator, double_length):
    population = Population.empty().add_children(GENOMES).sort(string_incubator, double_length)

    assert population.fitnesses() == [2462, 1982, 1836, 1824, 142, 142, 44, 30, 18]
    assert isinstance(population, SortedPopulation)
    assert all(individual.generation == 0 for individual in population)


def test_add_children_tracks_counts():
    population = Population.empty().add_children([1, 2, 3])
    assert population.num_children == 3
    assert population.previous_generation_size == 0

    population = population.next_generation()
    assert population.generation == 1
    assert population.num_children == 0
    assert population.previous_generation_size == 3

    population = population.add_children([4, 5])
    assert len(population) == 5
    assert population.num_children == 2
    assert population.previous_generation_size == 3
    assert [i.generation for i in population] == [0, 0, 0, 1, 1]
    assert [i.genome for i in population.current_generation()] == [4, 5]


def test_transitions_leave_source_untouched():
    base = Population.empty().add_children([1, 2, 3])
    base.next_generation().add_children([4])
    base.truncate(1)

    assert base.genomes() == [1, 2, 3]
    assert base.generation == 0
    assert base.num_children == 3


def test_sort_does_not_modify_unsorted_population(string_incubator, double_length):
    unsorted = Population.empty().add_children([3, 1, 2])
    unsorted.sort(string_incubator, double_length)

    assert unsorted.genomes() == [3, 1, 2]
    assert unsorted.fitnesses() == [None, None, None]


def test_truncate_recounts_children():
    population = (
        Population.empty().add_children([1, 2]).next_generation().add_children([3, 4, 5])
    )
    truncated = population.truncate(3)

    assert truncated.genomes() == [1, 2, 3]
    assert truncated.num_children == 1
    assert truncated.previous_generation_size == 2
    assert len(population.truncate(10)) == 5
    assert len(population.truncate(0)) == 0


def test_truncate_rejects_negative_length():
    with pytest.raises(PopulationStateError):
        Population.empty().add_children([1]).truncate(-1)


def test_sort_is_idempotent(string_incubator, double_length):
    once = Population.empty().add_children(GENOMES).sort(string_incubator, double_length)
    twice = UnsortedPopulation(
        once.individuals, generation=once.generation, num_children=once.num_children
    ).sort(string_incubator, double_length)

    assert twice.genomes() == once.genomes()
    assert twice.fitnesses() == once.fitnesses()


def test_sort_reuses_existing_fitness():
    calls = []

    def score(phenotype):
        calls.append(phenotype)
        return phenotype

    fitness = SimpleFitness(score).use_existing_fitness()
    sorted_once = Population.empty().add_children([1, 2]).sort(IdentityIncubator(), fitness)
    sorted_once.next_generation().add_children([3]).sort(IdentityIncubator(), fitness)

    assert calls == [1, 2, 3]


def test_sorted_population_requires_fitness():
    unsorted = Population.empty().add_children([1])
    with pytest.raises(PopulationStateError):
        SortedPopulation(unsorted.individuals)


def test_best_of_empty_population():
    with pytest.raises(PopulationStateError):
        SortedPopulation().best()


def test_sort_empty_population(double_length):
    population = Population.empty().sort(IdentityIncubator(), double_length)
    assert len(population) == 0


def test_growth_failure_is_wrapped(double_length):
    def explode(genome):
        raise RuntimeError("bad genome")

    with pytest.raises(GrowthError):
        Population.empty().add_children([1]).sort(FunctionIncubator(explode), double_length)


def test_growth_failure_from_custom_incubator(double_length):
    class Broken(IdentityIncubator):
        def grow(self, genome):
            raise KeyError(genome)

    with pytest.raises(GrowthError) as excinfo:
        Population.empty().add_children([1]).sort(Broken(), double_length)
    assert isinstance(excinfo.value.__cause__, KeyError)


def test_fitness_failure_is_wrapped():
    class Broken(FitnessFunction):
        def evaluate(self, phenotypes_with_fitnesses):
            raise RuntimeError("scoring failed")

    with pytest.raises(FitnessError):
        Population.empty().add_children([1]).sort(IdentityIncubator(), Broken())


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [1, None], [1.0, float("nan")]])
def test_invalid_fitness_batches(values):
    with pytest.raises(FitnessError):
        Population.empty().add_children([1, 2]).sort(IdentityIncubator(), ListFitness(values))


def test_parallel_growth_matches_sequential(string_incubator, double_length):
    sequential = Population.empty().add_children(GENOMES).sort(string_incubator, double_length)
    with ThreadPoolExecutor(max_workers=4) as executor:
        parallel = Population.empty().add_children(GENOMES).sort(
            string_incubator, double_length, executor
        )

    assert parallel.genomes() == sequential.genomes()
    assert parallel.fitnesses() == sequential.fitnesses()


def test_repr():
    population = Population.empty().add_children([1, 2])
    assert repr(population) == "UnsortedPopulation(size=2, generation=0, num_children=2)"


def test_sorted_population_rejects_out_of_order_individuals():
    individuals = [Individual(genome=1, fitness=1), Individual(genome=2, fitness=5)]
    with pytest.raises(PopulationStateError, match="out of order"):
        SortedPopulation(individuals)


def test_sorted_population_accepts_ties():
    individuals = [
        Individual(genome=1, fitness=5),
        Individual(genome=2, fitness=5),
        Individual(genome=3, fitness=1),
    ]
    assert SortedPopulation(individuals).best().genome == 1


def test_sorted_population_accepts_incomparable_pareto_neighbours():
    left = ParetoFitness(rank=0, crowding_distance=1.0, objectives=(1.0, 0.0))
    right = ParetoFitness(rank=0, crowding_distance=1.0, objectives=(0.0, 1.0))
    individuals = [Individual(genome=1, fitness=left), Individual(genome=2, fitness=right)]
    assert len(SortedPopulation(individuals)) == 2


def test_pareto_sort_is_idempotent():
    points = {g: [float(g % 7), float((g * 5) % 11)] for g in range(20)}
    fitness = ParetoFitnessFunction().with_objectives(lambda g: points[g])
    once = Population.empty().add_children(list(points)).sort(IdentityIncubator(), fitness)
    twice = UnsortedPopulation(
        once.individuals, generation=once.generation, num_children=once.num_children
    ).sort(IdentityIncubator(), fitness)

    assert twice.genomes() == once.genomes()
    assert twice.fitnesses() == once.fitnesses()
