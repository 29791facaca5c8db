import taichi as ti

from pointmpm.utils.constants import DELTA, ZEROMAT3x3
from pointmpm.utils.TypeDefination import vec3f, vec8f, vec8i, mat3x3, mat8x3


@ti.dataclass
class MaterialPoint:      # memory usage: 572B in float64
    materialID: int
    m: float
    vol: float
    x: vec3f
    v: vec3f
    deformation_gradient: mat3x3
    velocity_gradient: mat3x3
    stress: mat3x3
    node_ids: vec8i
    basis_values: vec8f
    basis_gradients: mat8x3

    @ti.func
    def _set_essential(self, materialID, mass, volume, position, velocity):
        self.materialID = int(materialID)
        self.m = float(mass)
        self.vol = float(volume)
        self.x = float(position)
        self.v = float(velocity)
        self.deformation_gradient = DELTA
        self.velocity_gradient = ZEROMAT3x3
        self.stress = ZEROMAT3x3

    @ti.func
    def _set_interpolation(self, node_ids, basis_values, basis_gradients):
        self.node_ids = node_ids
        self.basis_values = basis_values
        self.basis_gradients = basis_gradients

    @ti.func
    def _compute_internal_force(self, n):
        gradient = vec3f(self.basis_gradients[n, 0], self.basis_gradients[n, 1], self.basis_gradients[n, 2])
        return -self.vol * (self.stress.transpose() @ gradient)

    @ti.func
    def _update_particle_state(self, dx, dv):
        self.x += dx
        self.v += dv

    @ti.func
    def _update_deformation(self, velocity_gradient, dt):
        work = velocity_gradient * dt
        self.velocity_gradient = velocity_gradient
        self.deformation_gradient += work @ self.deformation_gradient
        self.vol *= (DELTA + work).determinant()
