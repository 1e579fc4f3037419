"""Tunable constants shared by the geometric kernel and the world shader."""

# Float comparison and degeneracy threshold (parallel rays, singular matrices)
EPSILON = 1e-4

# Offset used for over/under points; must stay above EPSILON to avoid acne
SHADOW_EPSILON = 1e-2

MAX_RECURSIONS = 5


class SceneSettings:
    def __init__(self, max_recursions=MAX_RECURSIONS, epsilon=EPSILON, shadow_epsilon=SHADOW_EPSILON):
        if max_recursions < 0:
            raise ValueError("max_recursions must be >= 0, got {}".format(max_recursions))
        if epsilon <= 0:
            raise ValueError("epsilon must be positive, got {}".format(epsilon))
        if shadow_epsilon <= epsilon:
            raise ValueError(
                "shadow_epsilon ({}) must be larger than epsilon ({})".format(shadow_epsilon, epsilon))

        self.max_recursions = int(max_recursions)
        self.epsilon = epsilon
        self.shadow_epsilon = shadow_epsilon

    def __repr__(self):
        return "SceneSettings(max_recursions={}, epsilon={}, shadow_epsilon={})".format(
            self.max_recursions, self.epsilon, self.shadow_epsilon)
