from genetic.fitness import SimpleFitness
from genetic.incubators import IdentityIncubator
from genetic.population import Population, UnsortedPopulation
from genetic.reinsert import ElitistReinserter

INCUBATOR = IdentityIncubator()
FITNESS = SimpleFitness(lambda p: p).use_existing_fitness()


def test_keeps_previous_generation_size():
    parents = Population.empty().add_children([5, 1, 3]).sort(INCUBATOR, FITNESS)
    merged = parents.next_generation().add_children([4, 0, 9, 2]).sort(INCUBATOR, FITNESS)

    survivors = ElitistReinserter().reinsert(merged)

    assert isinstance(survivors, UnsortedPopulation)
    assert survivors.genomes() == [9, 5, 4]
    assert survivors.generation == 1
    assert survivors.num_children == 2
    assert survivors.previous_generation_size == 1


def test_no_children_keeps_everyone():
    population = Population.empty().add_children([2, 1]).sort(INCUBATOR, FITNESS)
    merged = population.next_generation().sort(INCUBATOR, FITNESS)

    assert ElitistReinserter().reinsert(merged).genomes() == [2, 1]


def test_initial_population_keeps_nothing():
    # every individual of generation 0 is a child
    population = Population.empty().add_children([2, 1]).sort(INCUBATOR, FITNESS)
    assert len(ElitistReinserter().reinsert(population)) == 0
