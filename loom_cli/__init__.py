# schemaloom CLI package
