from hexmap import (
    Cube,
    HexMap,
    Layout,
    Pathfinder,
    Tile,
    cube_to_offset,
    line,
)

width, height = 10, 10
start = Cube(0, 0, 0)
goal = Cube(5, 2, -7)  # keep within demo bounds

blocked = {Cube(1, 0, -1), Cube(2, 1, -3), Cube(3, 1, -4)}


def tile(c: Cube) -> Tile:
    return Tile(passable=c not in blocked)


if __name__ == "__main__":
    hex_map = HexMap.rectangle(width, height, Layout.ODD_R, tile)
    result = Pathfinder(hex_map).find_path(start, goal)
    if result.path is None:
        print("no path (bounded search)" if result.bounded else "no path")
    else:
        print("path:", [cube_to_offset(c, Layout.ODD_R) for c in result.path])
        print("cost:", result.path.cost)
    print("line of sight:", line(start, goal))
