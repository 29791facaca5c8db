import taichi as ti


@ti.func
def trace(matrix):
    return matrix[0, 0] + matrix[1, 1] + matrix[2, 2]


@ti.func
def symmetric_part(matrix):
    return 0.5 * (matrix + matrix.transpose())


@ti.kernel
def kernel_compute_stress_strain(particleNum: int, materialID: int, dt: float, particle: ti.template(), matProps: ti.template()):
    for np in range(particleNum):
        if particle[np].materialID == materialID:
            particle[np].stress = matProps[0].ComputeStress(particle[np].deformation_gradient, particle[np].velocity_gradient, dt)


@ti.kernel
def kernel_count_invalid_material(particleNum: int, material_number: int, particle: ti.template()) -> int:
    invalid = 0
    for np in range(particleNum):
        if particle[np].materialID < 0 or particle[np].materialID >= material_number:
            invalid += 1
    return invalid
