"""Facade: one call drives several smart-home subsystems."""


class Lights:
    def __init__(self):
        self.on = False

    def turn_on(self) -> None:
        self.on = True
        print("Lights are on.")

    def turn_off(self) -> None:
        self.on = False
        print("Lights are off.")


class Thermostat:
    def __init__(self):
        self.temperature = None

    def set_temperature(self, temperature: int) -> None:
        self.temperature = temperature
        print(f"Thermostat is set to {temperature} degrees.")


class SecuritySystem:
    def __init__(self):
        self.active = False

    def activate(self) -> None:
        self.active = True
        print("Security system is activated.")

    def deactivate(self) -> None:
        self.active = False
        print("Security system is deactivated.")


class SmartHomeFacade:
    DAY_TEMPERATURE = 72
    NIGHT_TEMPERATURE = 65

    def __init__(
        self, lights: Lights, thermostat: Thermostat, security_system: SecuritySystem
    ):
        self.lights = lights
        self.thermostat = thermostat
        self.security_system = security_system

    def start_day(self) -> None:
        print("Starting the day...")
        self.lights.turn_on()
        self.thermostat.set_temperature(self.DAY_TEMPERATURE)
        self.security_system.deactivate()

    def end_day(self) -> None:
        print("Ending the day...")
        self.lights.turn_off()
        self.thermostat.set_temperature(self.NIGHT_TEMPERATURE)
        self.security_system.activate()


def main() -> None:
    smart_home = SmartHomeFacade(Lights(), Thermostat(), SecuritySystem())
    smart_home.start_day()
    smart_home.end_day()
