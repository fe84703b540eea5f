import argparse
from datetime import datetime


def get_datetime():
    now = datetime.now()
    date_time = now.strftime("%Y-%m-%d-%H%M")
    return "_" + date_time


def str2bool(v):
    if isinstance(v, bool):
       return v
    v = "".join([char for char in v if u"\xa0" not in char])  # avoid utf8 parsing error
    if v.lower() in ('yes', 'true', 't', 'y', '1'):
        return True
    elif v.lower() in ('no', 'false', 'f', 'n', '0'):
        return False
    else:
        raise argparse.ArgumentTypeError('Boolean value expected.')
