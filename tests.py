# coverage run --branch tests.py && coverage report -m
# python tests.py rfc5321 combinators   <-- only run the named modules

import inspect
import logging
import os
import pathlib
import sys
import unittest

import importlib.util
def imp_load_source ( module_name, path ):
	#print ( f'loading {path!r}' )
	spec = importlib.util.spec_from_file_location ( module_name, path )
	module = importlib.util.module_from_spec ( spec )
	spec.loader.exec_module ( module )
	return module

logging.basicConfig (
	stream = sys.stdout,
	#level = logging.DEBUG,
	format = (
		'[%(name)s %(levelname)s] '
		'%(message)s'
	),
)

loader = unittest.TestLoader()
suite = unittest.TestSuite()

def look_for_tests ( path, prefix='', only=() ):
	for p in sorted ( pathlib.Path ( path ).glob ( '*_test.py' ) ):
		if only and p.name[:-len ( '_test.py' )] not in only:
			continue
		module_name = prefix + os.path.splitext ( p.name )[0]
		module = imp_load_source ( module_name, str ( p ) )
		for attr in dir ( module ):
			if attr[0] != '_':
				x = getattr ( module, attr )
				if inspect.isclass ( x ) and issubclass ( x, unittest.TestCase ):
					suite.addTest ( loader.loadTestsFromTestCase ( x ) )

look_for_tests ( 'tests', 'tests.', sys.argv[1:] )

result = unittest.TextTestRunner ( verbosity = 1, failfast = True ).run ( suite )
sys.exit ( 0 if result.wasSuccessful() else 1 )
