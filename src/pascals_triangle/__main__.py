from pascals_triangle.scripts.find_collisions import main


if __name__ == '__main__':
    raise SystemExit(main())
