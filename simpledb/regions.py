from simpledb.entities import Region


__all__ = ['REGIONS', 'get_region']


US_EAST_1 = Region('US East (Northern Virginia) Region', 'sdb.amazonaws.com')
US_WEST_1 = Region('US West (Northern California) Region', 'sdb.us-west-1.amazonaws.com')
US_WEST_2 = Region('US West (Oregon) Region', 'sdb.us-west-2.amazonaws.com')
EU_WEST_1 = Region('EU (Ireland) Region', 'sdb.eu-west-1.amazonaws.com')
AP_SOUTHEAST_1 = Region('Asia Pacific (Singapore) Region', 'sdb.ap-southeast-1.amazonaws.com')
AP_NORTHEAST_1 = Region('Asia Pacific (Tokyo) Region', 'sdb.ap-northeast-1.amazonaws.com')
SA_EAST_1 = Region('South America (Sao Paulo) Region', 'sdb.sa-east-1.amazonaws.com')


REGIONS = {
    'us-east-1': US_EAST_1,
    'us-west-1': US_WEST_1,
    'us-west-2': US_WEST_2,
    'eu-west-1': EU_WEST_1,
    'ap-southeast-1': AP_SOUTHEAST_1,
    'ap-northeast-1': AP_NORTHEAST_1,
    'sa-east-1': SA_EAST_1,
}


def get_region(region):
    """
    Returns the `Region` for a region name such as ``'eu-west-1'``. A `Region`
    instance is returned unchanged.
    """
    if isinstance(region, Region):
        return region
    try:
        return REGIONS[region]
    except (KeyError, TypeError):
        raise ValueError('Unknown SimpleDB region: %r' % (region,))
