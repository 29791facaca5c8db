from pointmpm.utils.TypeDefination import vec3f, mat3x3

GRAVITY = 9.81

DELTA = mat3x3([[1., 0., 0.], [0., 1., 0.], [0., 0., 1.]])
ZEROVEC3f = vec3f([0., 0., 0.])
ZEROMAT3x3 = mat3x3([[0., 0., 0.], [0., 0., 0.], [0., 0., 0.]])
