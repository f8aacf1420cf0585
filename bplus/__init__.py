"""bplus - fan a query out to public search backends and merge the results."""

__version__ = "0.1.0"
