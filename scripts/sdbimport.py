if __name__ == '__main__':
    import logging
    import os
    import sys
    sys.path.insert(1, os.path.normpath(os.path.join(sys.path[0], '..')))

    import simplejson

    from simpledb import SimpleDB
    from simpledb.dump import sdbimport
    import settings

    if len(sys.argv) != 3:
        print('Usage: python sdbimport.py <domain> <json_file>', file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(level=logging.INFO)

    print("Loading...", file=sys.stderr)
    with open(sys.argv[2]) as f:
        items = simplejson.load(f)

    print("Importing...", file=sys.stderr)
    sdb = SimpleDB(settings.AWS_KEY, settings.AWS_SECRET, settings.SDB_REGION)
    sdbimport(sdb, sys.argv[1], items)

    print("All done.", file=sys.stderr)
