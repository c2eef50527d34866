"""
Ranks canned answers for a few questions with the cross-language model.
"""

from unisim import CrossLanguageModel, NumericInvariantError, word_counts

TRAINING_PAIRS = [
    ("I want aa", "a"),
    ("I want bb", "b"),
    ("I want cc", "c"),
]

QUERIES = ["I want", "I want aa", "I want bb", "I want aa bb cc", "I want nothing"]


def show(model: CrossLanguageModel, sentence: str):
    print(f"\n{sentence}:")
    try:
        sims = model.similarities(word_counts(sentence))
    except NumericInvariantError as e:
        print(f"  ❌ cannot rank: {e}")
        return

    for sim in sims:
        output = " ".join(sim.output)
        print(f"  {output:<10} divergence={-sim.similarity:.6f}")


def main():
    print("=== 🧪 Cross-language model demo ===")

    model = CrossLanguageModel(smoothing_coefficient=0.9)
    model.train_batch(
        [(word_counts(question), word_counts(answer)) for question, answer in TRAINING_PAIRS]
    )
    model.summary()

    for sentence in QUERIES:
        show(model, sentence)


if __name__ == "__main__":
    main()
