## Having a conftest.py here puts the project root on sys.path, so the
## tests can import kill_iocost without installing it first.
