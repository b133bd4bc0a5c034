"""In-memory conversions. networkx_adapter needs the optional 'networkx' extra."""
