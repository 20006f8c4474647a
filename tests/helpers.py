"""
Shared test doubles
"""

GB = 1024 ** 3


class FakeSampler:
    """Deterministic stand-in for the psutil sampler"""

    def __init__(self, sample):
        self.sample_value = sample
        self.calls = 0

    def sample(self):
        self.calls += 1
        return self.sample_value
