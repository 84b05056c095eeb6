if __name__ == '__main__':
    import logging
    import os
    import sys
    sys.path.insert(1, os.path.normpath(os.path.join(sys.path[0], '..')))

    from simpledb import SimpleDB
    from simpledb.dump import sdbcopy
    import settings

    if len(sys.argv) != 3:
        print('Usage: python sdbcopy.py from_domain to_domain', file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=logging.INFO)
    sdb = SimpleDB(settings.AWS_KEY, settings.AWS_SECRET, settings.SDB_REGION)

    print("Copying...", file=sys.stderr)
    sdbcopy(sdb, sys.argv[1], sys.argv[2])
    print("All done...", file=sys.stderr)
