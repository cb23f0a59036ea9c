# -*- coding: utf-8 -*-

"""
Increments the patch version of xdo in xdo/__init__.py and setup.py
"""

def replace_version( file_name : str, find_str : str, version : str = None ) -> str:
    """ Replaces the version string following 'find_str' in 'file_name'. If 'version' is None, the patch number is incremented """
    with open(file_name, "rt") as fh:
        text = fh.read()
    i = text.find(find_str)
    assert i>0, "Error: cannot find string '%s' in %s" % (find_str, file_name)
    i += len(find_str)
    j = text.find('"', i)
    assert j>=0, "Error: cannot find closing quotation marks in %s" % file_name
    if version is None:
        x = [ int(k) for k in text[i:j].split('.') ]
        assert len(x) == 3, "Error: found %s not a version ID" % text[i:j]
        x[-1] += 1
        version = "%ld.%ld.%ld" % ( x[0], x[1], x[2] )
    with open(file_name, "wt") as fh:
        fh.write(text[:i] + version + text[j:])
    print("Upgraded package version to %s in %s" % (version,file_name))
    return version

version = replace_version( "./xdo/__init__.py", '__version__ = "' )
replace_version( "./setup.py", 'version="', version )
