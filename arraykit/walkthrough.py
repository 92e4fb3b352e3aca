"""
Array Walkthrough
=================
Console demonstrations of primitive array operations followed by the
DynamicArray scenario.  Each function prints what it shows and returns
the data so callers (and tests) can inspect it.
"""

from arraykit.containers.array_errors import NOT_FOUND
from arraykit.containers.dynamic_array import DynamicArray
from arraykit.search import linear_search


def initialization():
    fixed = (1, 2, 3, 4, 5)

    dynamic = []
    for value in range(1, 6):
        dynamic.append(value)

    print(f"Fixed array: {list(fixed)}")
    print(f"Dynamic array: {dynamic}")
    return fixed, dynamic


def accessing_elements():
    arr = [1, 2, 3, 4, 5]
    print(f"The first element is: {arr[0]}")
    print(f"The third element is: {arr[2]}")
    return arr[0], arr[2]


def iteration():
    arr = [1, 2, 3, 4, 5]
    for element in arr:
        print(element)
    return arr


def insertion():
    arr = [1, 2, 3, 4, 5]
    arr.append(6)
    # Inserting in the middle shifts every later element right
    arr.insert(2, 10)
    print(f"Array after insertion: {arr}")
    return arr


def deletion():
    arr = [1, 2, 3, 4, 5]
    # Deleting shifts every element after the deletion point left
    del arr[2]
    print(f"Array after deletion: {arr}")
    return arr


def search():
    arr = [1, 2, 3, 4, 5]
    found = linear_search(arr, 3) != NOT_FOUND
    print(f"Found: {found}")
    return found


def dynamic_array_scenario():
    """add 1,2,3 -> insert(1, 4) -> remove_at(1) -> index_of(3)."""
    array = DynamicArray()
    snapshots = []

    for value in (1, 2, 3):
        array.add(value)
    array.display()
    snapshots.append(array.to_list())

    array.insert(1, 4)
    array.display()
    snapshots.append(array.to_list())

    array.remove_at(1)
    array.display()
    snapshots.append(array.to_list())

    position = array.index_of(3)
    print(position)
    return snapshots, position


def run_all():
    for step in (initialization, accessing_elements, iteration,
                 insertion, deletion, search, dynamic_array_scenario):
        print(f"--- {step.__name__} ---")
        step()


if __name__ == "__main__":
    run_all()
