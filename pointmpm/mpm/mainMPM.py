from taichi.lang.impl import current_cfg

from pointmpm.mpm.engines.ExplicitEngine import ExplicitEngine
from pointmpm.mpm.GenerateManager import GenerateManager
from pointmpm.mpm.MPMBase import Solver
from pointmpm.mpm.Recorder import WriteFile
from pointmpm.mpm.SceneManager import myScene
from pointmpm.mpm.Simulation import Simulation
from pointmpm.utils.ObjectIO import DictIO, read_dict_list


class MPM(object):
    def __init__(self, title='Explicit Material Point Method on a Structured Hexahedral Mesh', log=True):
        if log:
            print('# =================================================================== #')
            print('#', "".center(67), '#')
            print('#', "Welcome to pointmpm -- Material Point Method Engine !".center(67), '#')
            print('#', "".center(67), '#')
            print('#', title.center(67), '#')
            print('#', "".center(67), '#')
            print('# =================================================================== #', '\n')
        self.sims = Simulation()
        self.scene = myScene()
        self.generator = GenerateManager()
        self.enginer = None
        self.recorder = None
        self.solver = None

    def set_configuration(self, log=True, **kwargs):
        self.sims.set_cell_number(DictIO.GetEssential(kwargs, "cell_number"))
        self.sims.set_cell_width(DictIO.GetEssential(kwargs, "cell_width"))
        self.sims.set_origin(DictIO.GetAlternative(kwargs, "origin", [0., 0., 0.]))
        self.sims.set_gravity(DictIO.GetAlternative(kwargs, "gravity", self.sims.gravity))
        self.sims.set_has_gravity(DictIO.GetAlternative(kwargs, "has_gravity", True))
        self.sims.set_order(DictIO.GetAlternative(kwargs, "order", 1))
        self.scene.activate_element(self.sims)
        if log:
            self.print_basic_simulation_info()
            print('\n')

    def set_solver(self, solver, log=True):
        self.sims.set_timestep(DictIO.GetEssential(solver, "Timestep"))
        self.sims.set_num_time_steps(DictIO.GetEssential(solver, "NumTimeSteps"))
        self.sims.set_write_frequency(DictIO.GetAlternative(solver, "WriteFrequency", 1))
        self.sims.set_output_file(DictIO.GetAlternative(solver, "OutputFile", "OutputData/particles"))
        self.sims.set_CFL(DictIO.GetAlternative(solver, "CFL", 0.5))
        if log:
            self.print_solver_info()
            print('\n')

    def print_basic_simulation_info(self):
        print(" MPM Basic Configuration ".center(71,"-"))
        print(("Simulation Type: " + str(current_cfg().arch)).ljust(67))
        print(("Cell Number: " + str(self.sims.cell_number)).ljust(67))
        print(("Cell Width: " + str(self.sims.cell_width)).ljust(67))
        print(("Origin: " + str(self.sims.origin)).ljust(67))
        print(("Gravity: " + (str(self.sims.gravity.tolist()) if self.sims.has_gravity else "None")).ljust(67))
        print(("Particle Order: " + str(self.sims.order)).ljust(67))

    def print_solver_info(self):
        print(" MPM Solver Information ".center(71,"-"))
        print(("Timestep: " + str(self.sims.delta)).ljust(67))
        print(("Number of Time Steps: " + str(self.sims.num_time_steps)).ljust(67))
        print(("Write Frequency: " + str(self.sims.write_frequency)).ljust(67))
        print(("Output File: " + str(self.sims.output_file)).ljust(67))
        print(("CFL: " + str(self.sims.CFL)).ljust(67))

    def add_material(self, model, material, log=True):
        read_dict_list(material, self.scene.material.add_material, constitutive_model=model, log=log)

    def set_material_models(self, materials):
        self.scene.material.set_material_models(materials)

    def add_boundary_condition(self, boundary, log=True):
        if self.scene.element is None:
            raise RuntimeError("Function: set_configuration should be executed first")
        if isinstance(boundary, dict):
            faces = ["-x", "+x", "-y", "+y", "-z", "+z"]
            boundary = [DictIO.GetAlternative(boundary, face, "Free") for face in faces]
        self.scene.set_boundary_conditions(boundary)
        if log:
            self.scene.print_boundary_message()

    def add_geometry(self, geometry, log=True):
        if isinstance(geometry, (list, tuple)):
            for g in geometry:
                self.generator.add_geometry(g, log)
        else:
            self.generator.add_geometry(geometry, log)

    def initialize(self, order=None, geometries=None, log=True):
        if self.scene.element is None:
            raise RuntimeError("Function: set_configuration should be executed first")
        if not order is None:
            self.sims.set_order(order)
        particles = self.generator.initialize(self.scene.element, self.sims.order, geometries)
        self.scene.add_particles(particles)
        if log:
            self.scene.print_particle_message()

    def add_essentials(self):
        self.enginer = ExplicitEngine(self.sims)
        self.recorder = WriteFile(self.sims)
        self.solver = Solver(self.sims, self.enginer, self.recorder)

    def run(self, function=None):
        if self.sims.output_file is None:
            raise RuntimeError("Function: set_solver should be executed first")
        self.add_essentials()
        self.solver.set_callback_function(function)
        self.solver.Solver(self.scene)

    def solve(self, num_time_steps, time_step_size, output_file, write_frequency, log=False):
        self.set_solver({"Timestep": time_step_size, "NumTimeSteps": num_time_steps,
                         "OutputFile": output_file, "WriteFrequency": write_frequency}, log=log)
        self.run()

    def get_particle_data(self):
        if self.scene.particle is None:
            raise RuntimeError("Particles should be generated first")
        return self.scene.get_particle_data()
