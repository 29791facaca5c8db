import taichi as ti

from pointmpm.utils.TypeDefination import vec3f


@ti.kernel
def kernel_add_particles(particleNum: int, particle: ti.template(), materialID: ti.types.ndarray(), mass: ti.types.ndarray(), volume: ti.types.ndarray(), 
                         position: ti.types.ndarray(), velocity: ti.types.ndarray()):
    for np in range(particleNum):
        particle[np]._set_essential(materialID[np], mass[np], volume[np], vec3f(position[np, 0], position[np, 1], position[np, 2]), 
                                    vec3f(velocity[np, 0], velocity[np, 1], velocity[np, 2]))
