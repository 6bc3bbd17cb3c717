#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: hexconv/__main__.py

from hexconv.main import main

if __name__ == "__main__":
    main()
