import taichi as ti

from pointmpm.utils.constants import ZEROVEC3f
from pointmpm.utils.TypeDefination import vec3f


@ti.kernel
def kernel_mass_p2g(particleNum: int, particle: ti.template(), node_m: ti.template()):
    for np in range(particleNum):
        for n in ti.static(range(8)):
            node_m[particle[np].node_ids[n]] += particle[np].m * particle[np].basis_values[n]


@ti.kernel
def kernel_momentum_p2g(particleNum: int, particle: ti.template(), node_momentum: ti.template()):
    for np in range(particleNum):
        for n in ti.static(range(8)):
            node_momentum[particle[np].node_ids[n]] += particle[np].m * particle[np].v * particle[np].basis_values[n]


@ti.kernel
def kernel_internal_force_p2g(particleNum: int, particle: ti.template(), node_force: ti.template()):
    for np in range(particleNum):
        for n in ti.static(range(8)):
            node_force[particle[np].node_ids[n]] += particle[np]._compute_internal_force(n)


@ti.kernel
def kernel_compute_nodal_impulse(gridSum: int, dt: float, gravity: ti.types.vector(3, float), node_m: ti.template(), node_force: ti.template(), node_impulse: ti.template()):
    for ng in range(gridSum):
        node_impulse[ng] = dt * node_force[ng] + dt * node_m[ng] * gravity


@ti.kernel
def kernel_update_particle_position_velocity(particleNum: int, dt: float, particle: ti.template(), node_m: ti.template(), node_momentum: ti.template(), node_impulse: ti.template()):
    for np in range(particleNum):
        dx, dv = vec3f(0., 0., 0.), vec3f(0., 0., 0.)
        for n in ti.static(range(8)):
            nodeID = particle[np].node_ids[n]
            mass = node_m[nodeID]
            if mass > 0.:
                shape_fn = particle[np].basis_values[n]
                dx += dt * (node_momentum[nodeID] + node_impulse[nodeID]) * shape_fn / mass
                dv += node_impulse[nodeID] * shape_fn / mass
        particle[np]._update_particle_state(dx, dv)


@ti.kernel
def kernel_compute_grid_velocity(gridSum: int, node_m: ti.template(), node_velocity: ti.template()):
    for ng in range(gridSum):
        if node_m[ng] > 0.:
            node_velocity[ng] /= node_m[ng]
        else:
            node_velocity[ng] = ZEROVEC3f


@ti.kernel
def kernel_update_particle_gradient(particleNum: int, dt: float, particle: ti.template(), node_velocity: ti.template()):
    for np in range(particleNum):
        velocity_gradient = ti.Matrix.zero(float, 3, 3)
        for n in ti.static(range(8)):
            velocity = node_velocity[particle[np].node_ids[n]]
            for i in ti.static(range(3)):
                for j in ti.static(range(3)):
                    velocity_gradient[i, j] += particle[np].basis_gradients[n, i] * velocity[j]
        particle[np]._update_deformation(velocity_gradient, dt)


@ti.kernel
def kernel_count_degenerate_volume(particleNum: int, particle: ti.template()) -> int:
    degenerate = 0
    for np in range(particleNum):
        if particle[np].vol <= 0.:
            degenerate += 1
    return degenerate
