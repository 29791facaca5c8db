from pointmpm import *

init(arch="cpu")

mpm = MPM()

mpm.set_configuration(cell_number=[20, 20, 20],
                      cell_width=0.05,
                      gravity=[0., 0., -9.81],
                      has_gravity=True,
                      order=2)

mpm.set_solver(solver={
                           "Timestep":                   1e-4,
                           "NumTimeSteps":               5000,
                           "WriteFrequency":             100,
                           "OutputFile":                 "OutputData/elastic_sphere"
                      })

mpm.add_material(model="LinearElastic",
                 material={
                               "MaterialID":           0,
                               "YoungModulus":         1e6,
                               "PossionRatio":         0.3
                 })

mpm.add_boundary_condition(boundary={
                                        "-x": "FreeSlip",
                                        "+x": "FreeSlip",
                                        "-y": "FreeSlip",
                                        "+y": "FreeSlip",
                                        "-z": "NoSlip",
                                        "+z": "Free"
                                    })

mpm.add_geometry(geometry={
                               "Type":               "Sphere",
                               "Center":             [0.5, 0.5, 0.5],
                               "Radius":             0.2,
                               "MaterialID":         0,
                               "Density":            1000.,
                               "InitialVelocity":    [0., 0., -1.]
                          })

mpm.initialize()

mpm.run()
