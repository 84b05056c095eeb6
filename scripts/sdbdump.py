if __name__ == '__main__':
    import logging
    import os
    import sys
    sys.path.insert(1, os.path.normpath(os.path.join(sys.path[0], '..')))

    from simpledb import SimpleDB
    from simpledb.dump import sdbdump
    import settings

    if len(sys.argv) != 2:
        print('Usage: python sdbdump.py <domain>', file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=logging.INFO)
    sdb = SimpleDB(settings.AWS_KEY, settings.AWS_SECRET, settings.SDB_REGION)

    print("Dumping...", file=sys.stderr)
    print(sdbdump(sdb, sys.argv[1]))
    print("All done...", file=sys.stderr)
