def climb_cost(diff):
    """Cost of moving to a neighbouring cell diff metres higher.

    Flat or downhill moves cost 1; climbing adds the square of the climb.
    """
    cost = 1
    if diff > 0:
        cost += diff * diff
    return cost


def climb_descent_cost(diff):
    """Like climb_cost, but descending earns the drop back.

    Downhill moves cost 1 + diff, which is negative for drops of more than
    one unit. Any closed walk on a grid still costs at least its length,
    since each climb d is charged d*d >= d.
    """
    cost = 1
    if diff > 0:
        cost += diff * diff
    else:
        cost += diff
    return cost


COST_FUNCTIONS = {
    "climb": climb_cost,
    "climb_descent": climb_descent_cost,
}


def get_cost_function(name):
    try:
        return COST_FUNCTIONS[name]
    except KeyError:
        raise ValueError(f"Unknown cost function {name!r}, expected one of {sorted(COST_FUNCTIONS)}")
