# -*- coding: utf-8 -*-

# file    :  common/exception.py
# project :  nativewhich
# license :  MIT
# check repository for more information


class NativeWhichException(Exception):
    pass
