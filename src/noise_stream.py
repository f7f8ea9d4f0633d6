import logging
import math

from noise_random import DEFAULT_SEED, mix_1d, to_int32, to_uint32, word_to_signed_unit, word_to_zero_to_one
from noise_settings import NoiseSettings, SettingsError, read_yaml

logger = logging.getLogger(__name__)


class NoiseRandom:
    """Sequential random numbers read off a squirrel3 noise stream.

    Every value comes from the noise at the current position, and the position
    moves forward by one for each sample taken. The position can be read and
    set at any time to rewind or fast-forward the stream.

    Not safe to share between threads, give each worker its own stream.
    """

    def __init__(self, seed, position=0):
        self._seed = to_uint32(seed)
        self._position = to_int32(position)

    def __repr__(self):
        return 'NoiseRandom(seed=' + str(self._seed) + ', position=' + str(self._position) + ')'

    def reset_seed(self, seed, position=0):
        self._seed = to_uint32(seed)
        self._position = to_int32(position)
        logger.debug("Stream reset to seed %d at position %d", self._seed, self._position)

    def get_seed(self):
        return self._seed

    def set_position(self, position):
        self._position = to_int32(position)

    def get_position(self):
        return self._position

    def _next_word(self):
        word = mix_1d(self._position, self._seed)
        self._position = to_int32(self._position + 1)
        return word

    def next_uint(self):
        return self._next_word()

    def next_int(self):
        return to_int32(self._next_word())

    def next_float_zero_to_one(self):
        return word_to_zero_to_one(self._next_word())

    def next_float_signed_unit(self):
        return word_to_signed_unit(self._next_word())

    def next_int_less_than(self, bound):
        """Random int from 0 up to bound, exclusive.

        A bound of 0 gives 0 without using up a position. Negative bounds
        mirror the positive case and give values from bound + 1 up to 0.
        """
        if bound == 0:
            return 0
        # the modulo catches float rounding landing exactly on bound
        return int(math.floor(self.next_float_zero_to_one() * bound)) % bound

    def next_int_in_range(self, lower_inclusive, upper_inclusive):
        if upper_inclusive < lower_inclusive:
            raise NoiseRangeError("Inverted int range: " + str(lower_inclusive) + " > " + str(upper_inclusive))

        span = upper_inclusive - lower_inclusive + 1
        offset = int(math.floor(self.next_float_zero_to_one() * span))
        return min(lower_inclusive + offset, upper_inclusive)

    def next_float_in_range(self, lower_inclusive, upper_inclusive):
        if not (math.isfinite(lower_inclusive) and math.isfinite(upper_inclusive)):
            raise NoiseRangeError("Float range bounds must be finite")
        if upper_inclusive < lower_inclusive:
            raise NoiseRangeError("Inverted float range: " + str(lower_inclusive) + " > " + str(upper_inclusive))

        # same as (s + 1) * ((hi - lo) / 2) + lo, halved first so wide finite ranges do not overflow
        half_width = upper_inclusive / 2 - lower_inclusive / 2
        midpoint = lower_inclusive / 2 + upper_inclusive / 2
        value = midpoint + self.next_float_signed_unit() * half_width
        return min(max(value, lower_inclusive), upper_inclusive)

    def chance(self, probability_true):
        return self.next_float_zero_to_one() < probability_true

    def direction_2d(self):
        theta = self.next_float_in_range(0, 2 * math.pi)
        return (math.cos(theta), math.sin(theta))

    def in_circle(self, radius):
        """Random point within radius of the origin, by rejection sampling.

        Each attempt takes two positions. About 79% of attempts land inside, so
        the loop ends quickly in practice, but there is no cap on attempts.
        """
        if not math.isfinite(radius) or radius < 0:
            raise NoiseRangeError("Circle radius must be finite and non-negative, got " + str(radius))

        attempts = 0
        while True:
            x = self.next_float_in_range(-radius, radius)
            y = self.next_float_in_range(-radius, radius)
            attempts += 1
            # hypot keeps huge radii from overflowing to inf
            if math.hypot(x, y) <= radius:
                return (x, y)

            if attempts == NoiseSettings.rejection_warning_attempts:
                logger.warning("in_circle(%s) rejected %d attempts in a row at position %d, seed %d",
                               radius, attempts, self._position, self._seed)

    def choice(self, seq):
        if len(seq) == 0:
            raise NoiseRangeError("Cannot choose from an empty sequence")
        return seq[self.next_int_less_than(len(seq))]

    def weighted_choice(self, seq, weights):
        if len(seq) != len(weights):
            raise NoiseRangeError("Got " + str(len(weights)) + " weights for " + str(len(seq)) + " items")
        if any(weight < 0 for weight in weights):
            raise NoiseRangeError("Weights cannot be negative")
        total = sum(weights)
        if not total > 0:
            raise NoiseRangeError("Weights must add up to more than 0")

        target = self.next_float_zero_to_one() * total
        cumulative = 0
        last_index = 0
        for i, weight in enumerate(weights):
            if weight <= 0:
                continue
            cumulative += weight
            last_index = i
            if target < cumulative:
                return seq[i]

        # float rounding ran past the total, fall back to the last item that can be picked
        return seq[last_index]

    def fork(self, salt=0):
        """New independent stream, seeded from this stream's next value and salt."""
        return NoiseRandom(mix_1d(salt, self._next_word()))


class NoiseRangeError(ValueError):
    pass


def load_streams(path, default_seed=DEFAULT_SEED):
    """Build named streams from a yaml file.

    Each entry is either `name: seed` or `name: {seed: ..., position: ...}`.
    Entries without a seed use default_seed.
    """
    data = read_yaml(path)

    streams = {}
    for name, spec in data.items():
        position = 0
        if spec is None:
            seed = default_seed
        elif isinstance(spec, dict):
            unknown = set(spec) - {'seed', 'position'}
            if unknown:
                raise SettingsError("Unknown keys for stream " + str(name) + ": " + ', '.join(sorted(map(str, unknown))))
            seed = spec.get('seed', default_seed)
            position = spec.get('position', 0)
        else:
            seed = spec

        for label, value in (('seed', seed), ('position', position)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise SettingsError("Stream " + str(name) + " has a non-integer " + label + ": " + repr(value))

        streams[name] = NoiseRandom(seed, position)
        logger.debug("Loaded stream %s with seed %d at position %d", name, streams[name].get_seed(), streams[name].get_position())

    return streams
