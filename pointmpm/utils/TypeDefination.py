import taichi as ti


#===================================== #
#           Type Definition            #
#===================================== #
vec3f = ti.types.vector(3, float)
vec8f = ti.types.vector(8, float)
vec3i = ti.types.vector(3, int)
vec8i = ti.types.vector(8, int)

mat3x3 = ti.types.matrix(3, 3, float)
mat8x3 = ti.types.matrix(8, 3, float)
