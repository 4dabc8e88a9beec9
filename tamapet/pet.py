"""The virtual pet's state and the rules that advance it once per second."""

from __future__ import annotations

from dataclasses import dataclass

from tamapet.button import ButtonEvent

SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

SENSOR_MAX_VALUE = 4095


@dataclass
class Tamagotchi:
    """Health, hunger, energy and mood of the pet, with an internal clock."""

    MAX_HEALTH = 255
    MAX_ENERGY = 255

    MIN_TEMPERATURE = 5
    MAX_TEMPERATURE = 45
    MIN_COMFORT_TEMPERATURE = 20
    MAX_COMFORT_TEMPERATURE = 25
    TEMPERATURE_DAMAGE_PERIOD = 10
    TEMPERATURE_DAMAGE = 1

    MAX_SATIETY = 255
    SATIETY_FEED_PORTION = 10
    SATIETY_HUNGER_PORTION = 1
    SATIETY_HUNGER_PERIOD = 10
    SATIETY_DAMAGE_PERIOD = 10
    SATIETY_DAMAGE = 1

    MAX_BRIGHTNESS = 255
    MAX_COMFORT_SLEEP_BRIGHTNESS = 100
    MIN_COMFORT_AWAKE_BRIGHTNESS = 190
    ENERGY_PORTION = 3
    ENERGY_PERIOD = 10
    ENERGY_DAMAGE = 1

    MAX_HAPPINESS = 255
    HAPPINESS_PORTION = 3
    HAPPINESS_PERIOD = 10
    HAPPINESS_HEALING = 1

    health: int = MAX_HEALTH
    temperature: int = MIN_COMFORT_TEMPERATURE
    time: int = 12 * 60 * 60 + 30 * 60
    happiness: int = 0
    satiety: int = MAX_SATIETY
    energy: int = MAX_ENERGY
    brightness: int = MIN_COMFORT_AWAKE_BRIGHTNESS

    # clock

    def total_seconds(self) -> int:
        return self.time

    def clock_seconds(self) -> int:
        return self.total_seconds() % SECONDS_PER_MINUTE

    def clock_minutes(self) -> int:
        return self.total_seconds() // SECONDS_PER_MINUTE % MINUTES_PER_HOUR

    def clock_hours(self) -> int:
        return (
            self.total_seconds() // SECONDS_PER_MINUTE // MINUTES_PER_HOUR
            % HOURS_PER_DAY
        )

    def tick(self) -> None:
        """Advance the clock by one second."""
        self.time += 1

    def _every(self, period: int) -> bool:
        return self.total_seconds() % period == 0

    # health and energy

    def damage(self, dmg: int) -> None:
        self.health = max(self.health - dmg, 0)

    def heal(self, delta: int) -> None:
        self.health = min(self.health + delta, self.MAX_HEALTH)

    def use_energy(self, delta: int, dmg: int) -> None:
        """Spend energy; once it is exhausted, take damage instead."""
        if self.energy > delta:
            self.energy -= delta
        elif self.energy:
            self.energy = 0
        else:
            self.damage(dmg)

    def recover_energy(self, delta: int) -> None:
        self.energy = min(self.energy + delta, self.MAX_ENERGY)

    def is_dead(self) -> bool:
        return not self.health

    # satiety

    def feed(self) -> None:
        self.satiety = min(self.satiety + self.SATIETY_FEED_PORTION, self.MAX_SATIETY)

    def is_hungry(self) -> bool:
        return not self.satiety

    def damage_hungry(self) -> None:
        if self._every(self.SATIETY_DAMAGE_PERIOD) and self.is_hungry():
            self.damage(self.SATIETY_DAMAGE)

    def hunger(self) -> None:
        if self._every(self.SATIETY_HUNGER_PERIOD):
            self.satiety = max(self.satiety - self.SATIETY_HUNGER_PORTION, 0)

    # temperature

    def is_hot(self) -> bool:
        return self.temperature > self.MAX_COMFORT_TEMPERATURE

    def is_cold(self) -> bool:
        return self.temperature < self.MIN_COMFORT_TEMPERATURE

    def damage_temperature(self) -> None:
        if self._every(self.TEMPERATURE_DAMAGE_PERIOD) and (
            self.is_hot() or self.is_cold()
        ):
            self.damage(self.TEMPERATURE_DAMAGE)

    # brightness

    def is_awake_time(self) -> bool:
        return 12 <= self.clock_hours() < 18

    def is_sleep_time(self) -> bool:
        return 0 <= self.clock_hours() < 6

    def is_too_bright(self) -> bool:
        return (
            self.is_sleep_time()
            and self.brightness > self.MAX_COMFORT_SLEEP_BRIGHTNESS
        )

    def is_too_dark(self) -> bool:
        return (
            self.is_awake_time()
            and self.brightness < self.MIN_COMFORT_AWAKE_BRIGHTNESS
        )

    def calc_energy(self) -> None:
        if not self._every(self.ENERGY_PERIOD):
            return
        if self.is_too_bright() or self.is_too_dark():
            self.use_energy(self.ENERGY_PORTION, self.ENERGY_DAMAGE)
        elif self.is_sleep_time():
            self.recover_energy(self.ENERGY_PORTION)

    # happiness

    def happiness_to_healing(self) -> None:
        if self._every(self.HAPPINESS_PERIOD) and self.happiness > self.HAPPINESS_PORTION:
            self.happiness -= self.HAPPINESS_PORTION
            self.heal(self.HAPPINESS_HEALING)

    # one simulation step

    def step(self, event: ButtonEvent = ButtonEvent.NONE) -> None:
        """Advance one second, reacting to a button event; dead pets stay still."""
        if self.is_dead():
            return
        self.tick()

        if event is ButtonEvent.CLICK:
            self.feed()
        self.damage_hungry()
        self.hunger()

        self.damage_temperature()

        self.calc_energy()

        if event is ButtonEvent.HOLD:
            self.happiness = self.MAX_HAPPINESS
        self.happiness_to_healing()

    def apply_readings(self, temperature: int, brightness_raw: int) -> None:
        """Store sensor readings: temperature in degrees, brightness as a raw 12-bit value."""
        if not 0 <= brightness_raw <= SENSOR_MAX_VALUE:
            raise ValueError(
                f"brightness reading must be within 0..{SENSOR_MAX_VALUE}, "
                f"got {brightness_raw}"
            )
        if self.is_dead():
            return
        self.temperature = max(
            self.MIN_TEMPERATURE, min(temperature, self.MAX_TEMPERATURE)
        )
        self.brightness = brightness_raw * self.MAX_BRIGHTNESS // SENSOR_MAX_VALUE