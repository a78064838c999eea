from algokit.greedy import can_complete_circuit, jump


def _lap_is_possible(gas, cost, start):
    tank = 0
    n = len(gas)
    for step in range(n):
        i = (start + step) % n
        tank += gas[i] - cost[i]
        if tank < 0:
            return False
    return True


def test_can_complete_circuit_example():
    gas, cost = [1, 2, 3, 4, 5], [3, 4, 5, 1, 2]
    start = can_complete_circuit(gas, cost)
    assert start == 3
    assert _lap_is_possible(gas, cost, start)


def test_can_complete_circuit_impossible():
    assert can_complete_circuit([2, 3, 4], [3, 4, 3]) == -1


def test_can_complete_circuit_found_start_works():
    gas, cost = [5, 1, 2, 3, 4], [4, 4, 1, 5, 1]
    start = can_complete_circuit(gas, cost)
    assert 0 <= start < len(gas)
    assert _lap_is_possible(gas, cost, start)


def test_jump_example():
    assert jump([2, 3, 1, 1, 4]) == 2


def test_jump_trivial():
    assert jump([]) == 0
    assert jump([9]) == 0


def test_jump_unit_steps():
    nums = [1, 1, 1, 1]
    assert jump(nums) == len(nums) - 1


def test_jump_one_leap():
    nums = [10, 0, 0, 0]
    assert jump(nums) == jump([1, 0])