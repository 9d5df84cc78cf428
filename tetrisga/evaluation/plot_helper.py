import matplotlib.pyplot as plt
from matplotlib import style

from tetrisga.training.evolution import GenerationSummary


def balanced_results(results: list[float], interval=10) -> list[float]:
    balanced = []
    for i in range(len(results) - interval + 1):
        balanced.append(sum(results[i : i + interval]) / interval)
    return balanced


def plot_fitness(history: list[GenerationSummary], interval=1):
    style.use("fivethirtyeight")
    fig, ax = plt.subplots()
    generations = [summary.generation for summary in history]
    max_fitness = balanced_results([s.max_fitness for s in history], interval)
    mean_fitness = balanced_results([s.mean_fitness for s in history], interval)
    ax.plot(generations[interval - 1 :], max_fitness, label="max fitness")
    ax.plot(generations[interval - 1 :], mean_fitness, label="mean fitness")
    ax.set_xlabel("generation")
    plt.legend()
    plt.show()


def plot_weights(history: list[GenerationSummary]):
    style.use("fivethirtyeight")
    fig, ax = plt.subplots()
    rows = [s for s in history if s.best_weights is not None]
    if not rows:
        return
    height, lines, holes, bump = list(zip(*(s.best_weights for s in rows)))
    generations = [s.generation for s in rows]
    ax.plot(generations, height, label="aggregate height")
    ax.plot(generations, lines, label="lines")
    ax.plot(generations, holes, label="holes")
    ax.plot(generations, bump, label="bumpiness")
    plt.legend()
    plt.show()
