#!/usr/bin/env python

from bstengine.demo import main

if __name__ == '__main__':
    main()
