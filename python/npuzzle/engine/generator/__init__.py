from npuzzle.engine.generator.generator import DEFAULT_SEED, Shuffler

__all__ = ["DEFAULT_SEED", "Shuffler"]
