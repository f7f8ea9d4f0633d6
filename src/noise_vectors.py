import pygame

from noise_random import signed_unit_3d

# Convenience wrappers for code that works in pygame vectors,
# the streams themselves only deal in plain floats


def random_direction_vector(stream):
    x, y = stream.direction_2d()
    return pygame.math.Vector2(x, y)

def random_in_circle_vector(stream, radius):
    x, y = stream.in_circle(radius)
    return pygame.math.Vector2(x, y)

def noise_vector_2d(x, y, seed):
    # x and y components are read from two layers of 3d noise so they stay independent
    return pygame.math.Vector2(signed_unit_3d(x, y, 0, seed), signed_unit_3d(x, y, 1, seed))
