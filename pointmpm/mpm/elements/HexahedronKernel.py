import taichi as ti

from pointmpm.utils.TypeDefination import vec3f, vec3i


@ti.func
def locate_particle(position, origin, igrid_size, cnum):
    cell = vec3i(0, 0, 0)
    for d in ti.static(range(3)):
        index = int(ti.floor((position[d] - origin[d]) * igrid_size[d]))
        cell[d] = ti.min(ti.max(index, 0), cnum[d] - 1)
    return cell


@ti.func
def cell_node_ids(cell, gnum):
    # local node n = a + 2b + 4c sits at (i+a, j+b, k+c)
    xgrid = gnum[0]
    xygrid = gnum[0] * gnum[1]
    base = cell[0] + cell[1] * xgrid + cell[2] * xygrid
    node_ids = ti.Vector.zero(int, 8)
    for n in ti.static(range(8)):
        node_ids[n] = base + (n & 1) + ((n >> 1) & 1) * xgrid + ((n >> 2) & 1) * xygrid
    return node_ids


@ti.func
def map_physical_to_reference_frame(position, cell, origin, grid_size):
    local_coord = vec3f(0., 0., 0.)
    for d in ti.static(range(3)):
        local_coord[d] = 2. * (position[d] - origin[d] - cell[d] * grid_size[d]) / grid_size[d] - 1.
    return local_coord


@ti.func
def shape_function_value(local_coord):
    shape_fn = ti.Vector.zero(float, 8)
    for n in ti.static(range(8)):
        sx, sy, sz = 2. * (n & 1) - 1., 2. * ((n >> 1) & 1) - 1., 2. * ((n >> 2) & 1) - 1.
        shape_fn[n] = 0.125 * (1. + sx * local_coord[0]) * (1. + sy * local_coord[1]) * (1. + sz * local_coord[2])
    return shape_fn


@ti.func
def shape_function_gradient(local_coord, igrid_size):
    dshape_fn = ti.Matrix.zero(float, 8, 3)
    for n in ti.static(range(8)):
        sx, sy, sz = 2. * (n & 1) - 1., 2. * ((n >> 1) & 1) - 1., 2. * ((n >> 2) & 1) - 1.
        wx, wy, wz = 1. + sx * local_coord[0], 1. + sy * local_coord[1], 1. + sz * local_coord[2]
        # d(xi)/dx = 2 / h
        dshape_fn[n, 0] = 0.25 * sx * wy * wz * igrid_size[0]
        dshape_fn[n, 1] = 0.25 * sy * wx * wz * igrid_size[1]
        dshape_fn[n, 2] = 0.25 * sz * wx * wy * igrid_size[2]
    return dshape_fn


@ti.kernel
def kernel_locate_particles(particleNum: int, origin: ti.types.vector(3, float), grid_size: ti.types.vector(3, float), igrid_size: ti.types.vector(3, float),
                            cnum: ti.types.vector(3, int), gnum: ti.types.vector(3, int), particle: ti.template()):
    for np in range(particleNum):
        position = particle[np].x
        cell = locate_particle(position, origin, igrid_size, cnum)
        local_coord = map_physical_to_reference_frame(position, cell, origin, grid_size)
        particle[np]._set_interpolation(cell_node_ids(cell, gnum), shape_function_value(local_coord), shape_function_gradient(local_coord, igrid_size))
