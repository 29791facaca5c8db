import taichi as ti


class NodeFields(object):
    """Nodal buffers of the background grid, rebuilt from zero every step."""
    def __init__(self, gridSum) -> None:
        self.gridSum = int(gridSum)
        self.m = ti.field(float, shape=self.gridSum)
        self.momentum = ti.Vector.field(3, float, shape=self.gridSum)
        self.impulse = ti.Vector.field(3, float, shape=self.gridSum)
        self.force = ti.Vector.field(3, float, shape=self.gridSum)
        self.velocity = ti.Vector.field(3, float, shape=self.gridSum)

    def reset(self):
        self.m.fill(0)
        self.momentum.fill(0)
        self.impulse.fill(0)
        self.force.fill(0)
        self.velocity.fill(0)

