import numpy as np


class ParticleBatch(object):
    """Host-side particle arrays filled by the generator and then copied to the Taichi particle field."""
    def __init__(self, position=None, volume=None) -> None:
        self.position = np.zeros((0, 3)) if position is None else np.ascontiguousarray(position, dtype=np.float64).reshape(-1, 3)
        number = self.position.shape[0]
        self.volume = np.zeros(number) if volume is None else np.ascontiguousarray(volume, dtype=np.float64).reshape(number)
        self.mass = np.zeros(number)
        self.velocity = np.zeros((number, 3))
        self.materialID = np.zeros(number, dtype=np.int32)

    def __len__(self):
        return self.position.shape[0]

    def select(self, mask):
        batch = ParticleBatch(self.position[mask], self.volume[mask])
        batch.mass = self.mass[mask]
        batch.velocity = self.velocity[mask]
        batch.materialID = self.materialID[mask]
        return batch

    @staticmethod
    def concatenate(batches):
        batch = ParticleBatch(np.concatenate([b.position for b in batches] + [np.zeros((0, 3))]), 
                              np.concatenate([b.volume for b in batches] + [np.zeros(0)]))
        batch.mass = np.concatenate([b.mass for b in batches] + [np.zeros(0)])
        batch.velocity = np.concatenate([b.velocity for b in batches] + [np.zeros((0, 3))])
        batch.materialID = np.concatenate([b.materialID for b in batches] + [np.zeros(0, dtype=np.int32)]).astype(np.int32)
        return batch
