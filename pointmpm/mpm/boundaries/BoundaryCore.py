import taichi as ti

from pointmpm.utils.constants import ZEROVEC3f


@ti.kernel
def kernel_fix_nodal_vector(inodes: ti.template(), node_vector: ti.template()):
    for i in inodes:
        node_vector[inodes[i]] = ZEROVEC3f


@ti.kernel
def kernel_fix_nodal_component(inodes: ti.template(), direction: ti.template(), node_vector: ti.template()):
    for i in inodes:
        node_vector[inodes[i]][direction] = 0.
