from pointmpm import *

init(arch="cpu")

mpm = MPM()

mpm.set_configuration(cell_number=[30, 10, 20],
                      cell_width=0.05,
                      has_gravity=True,
                      order=2)

mpm.set_solver(solver={
                           "Timestep":                   5e-5,
                           "NumTimeSteps":               8000,
                           "WriteFrequency":             200,
                           "OutputFile":                 "OutputData/two_materials"
                      })

mpm.add_material(model="NeoHookean",
                 material={
                               "MaterialID":           0,
                               "YoungModulus":         5e5,
                               "PossionRatio":         0.3
                 })

mpm.add_material(model="Newtonian",
                 material={
                               "MaterialID":           1,
                               "BulkModulus":          2e5,
                               "Viscosity":            1e-2
                 })

mpm.add_boundary_condition(boundary=["NoSlip", "NoSlip", "FreeSlip", "FreeSlip", "NoSlip", "Free"])

mpm.add_geometry(geometry=[{
                               "Type":               "Sphere",
                               "Center":             [0.4, 0.25, 0.6],
                               "Radius":             0.15,
                               "MaterialID":         0,
                               "Density":            1200.
                           },
                           {
                               "Type":               "Box",
                               "BoundingBoxPoint":   [0., 0., 0.],
                               "BoundingBoxSize":    [1.5, 0.5, 0.3],
                               "MaterialID":         1,
                               "Density":            1000.
                           }])

mpm.initialize()

mpm.run()
