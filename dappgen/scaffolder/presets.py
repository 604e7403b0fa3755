"""Static configuration written into every generated project.

Dotted-path maps are consumed by :func:`dappgen.scaffolder.merge.merge_into`;
plain dicts are written verbatim as JSON.
"""

from __future__ import annotations

from typing import Any

from dappgen.models import ProjectContext

APP_ICON = "assets/image/app-icon.png"

ASSET_TYPES: tuple[str, ...] = ("image", "video", "json", "raw")
IMAGE_EXTENSIONS: tuple[str, ...] = ("png", "jpg", "jpeg", "gif")


def expo_options(ctx: ProjectContext) -> dict[str, Any]:
    """Expo settings merged into ``app.json`` before ejecting."""
    return {
        "expo.ios.bundleIdentifier": ctx.bundle_identifier,
        "expo.android.package": ctx.package_name,
        "expo.scheme": ctx.uri_scheme,
        "expo.icon": APP_ICON,
        "expo.splash.image": APP_ICON,
        "expo.splash.resizeMode": "contain",
        "expo.splash.backgroundColor": "#222222",
    }


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------

_DEPENDENCIES: dict[str, str] = {
    "@react-native-async-storage/async-storage": "1.13.4",
    "@walletconnect/react-native-dapp": "1.4.1",
    "react-native-svg": "12.1.0",
    "base-64": "1.0.0",
    "buffer": "6.0.3",
    "node-libs-browser": "2.2.1",
    "path-browserify": "0.0.0",
    "react-native-crypto": "2.2.0",
    "react-native-dotenv": "2.4.3",
    "react-native-localhost": "1.0.0",
    "react-native-get-random-values": "1.5.0",
    "react-native-stream": "0.1.9",
    "web3": "1.3.1",
}

_DEV_DEPENDENCIES: dict[str, str] = {
    "app-root-path": "3.0.0",
    "chokidar": "3.5.1",
    "commitizen": "4.2.3",
    "cz-conventional-changelog": "^3.2.0",
    "dotenv": "8.2.0",
    "enzyme": "3.11.0",
    "enzyme-adapter-react-16": "1.15.6",
    "husky": "4.3.8",
    "prettier": "2.2.1",
    "@typescript-eslint/eslint-plugin": "^4.0.1",
    "@typescript-eslint/parser": "^4.0.1",
    "eslint": "^7.8.0",
    "eslint-config-prettier": "^6.11.0",
    "eslint-plugin-eslint-comments": "^3.2.0",
    "eslint-plugin-functional": "^3.0.2",
    "eslint-plugin-import": "^2.22.0",
    "eslint-plugin-react": "7.22.0",
    "eslint-plugin-react-native": "3.10.0",
    "lint-staged": "10.5.3",
    "@types/node": "14.14.22",
    "@types/jest": "^26.0.20",
    "hardhat": "2.0.6",
    "@nomiclabs/hardhat-ethers": "^2.0.1",
    "@nomiclabs/hardhat-waffle": "^2.0.1",
    "chai": "^4.2.0",
    "ethereum-waffle": "^3.2.1",
    "jest": "26.6.3",
    "react-test-renderer": "17.0.1",
    "ts-node": "9.1.1",
}

# Node core modules resolved to browser-compatible packages by metro.
_REACT_NATIVE_ALIASES: dict[str, str] = {
    "stream": "react-native-stream",
    "crypto": "react-native-crypto",
    "path": "path-browserify",
    "process": "node-libs-browser/mock/process",
}

PACKAGE_OPTIONS: dict[Any, Any] = {
    "license": "MIT",
    "keywords": [
        "react",
        "react-native",
        "blockchain",
        "dapp",
        "ethereum",
        "web3",
        "starter",
        "react-native-web",
    ],
    "scripts.postinstall": "node_modules/.bin/ts-node scripts/postinstall",
    "scripts.test": "npx hardhat test && jest",
    "scripts.android": "node_modules/.bin/ts-node scripts/android",
    "scripts.ios": "node_modules/.bin/ts-node scripts/ios",
    "scripts.web": "node_modules/.bin/ts-node scripts/web",
    **{("dependencies", name): version for name, version in _DEPENDENCIES.items()},
    **{("devDependencies", name): version for name, version in _DEV_DEPENDENCIES.items()},
    **{("react-native", name): target for name, target in _REACT_NATIVE_ALIASES.items()},
    "jest.preset": "react-native",
    "jest.testMatch": ["**/__tests__/frontend/**/*.[jt]s?(x)"],
}

PACKAGE_OVERLAY: dict[str, Any] = {
    "config": {
        "commitizen": {
            "path": "./node_modules/cz-conventional-changelog",
        },
    },
    "husky": {
        "hooks": {
            "prepare-commit-msg": "exec < /dev/tty && git cz --hook",
            "pre-commit": "lint-staged",
            "pre-push": "test",
        },
    },
    "lint-staged": {
        "*.{ts,tsx,js,jsx}": "eslint --ext '.ts,.tsx,.js,.jsx' -c .eslintrc.json",
    },
}


# ---------------------------------------------------------------------------
# Lint / type-check / spelling
# ---------------------------------------------------------------------------

ESLINT_CONFIG: dict[str, Any] = {
    "root": True,
    "parser": "@typescript-eslint/parser",
    "env": {"es6": True},
    "ignorePatterns": [
        "node_modules",
        "build",
        "coverage",
        "babel.config.js",
        "metro.config.js",
        "hardhat.config.js",
        "__tests__/contracts",
    ],
    "plugins": ["import", "eslint-comments", "functional", "react", "react-native"],
    "extends": [
        "eslint:recommended",
        "plugin:eslint-comments/recommended",
        "plugin:@typescript-eslint/recommended",
        "plugin:import/typescript",
        "plugin:functional/lite",
        "prettier",
        "prettier/@typescript-eslint",
    ],
    "globals": {
        "console": True,
        "__DEV__": True,
    },
    "rules": {
        "@typescript-eslint/explicit-module-boundary-types": "off",
        "eslint-comments/disable-enable-pair": ["error", {"allowWholeFile": True}],
        "eslint-comments/no-unused-disable": "error",
        "import/order": [
            "error",
            {"newlines-between": "always", "alphabetize": {"order": "asc"}},
        ],
        "sort-imports": ["error", {"ignoreDeclarationSort": True, "ignoreCase": True}],
        "sort-keys": [
            "error",
            "asc",
            {"caseSensitive": True, "natural": False, "minKeys": 2},
        ],
        "react-native/no-unused-styles": 2,
        "react-native/split-platform-components": 2,
        "react-native/no-inline-styles": 2,
        "react-native/no-color-literals": 2,
        "react-native/no-raw-text": 2,
        "react-native/no-single-element-style-arrays": 2,
    },
    "parserOptions": {
        "ecmaFeatures": {"jsx": True},
    },
}

TSCONFIG: dict[str, Any] = {
    "compilerOptions": {
        "allowSyntheticDefaultImports": True,
        "jsx": "react-native",
        "lib": ["dom", "esnext"],
        "moduleResolution": "node",
        "noEmit": True,
        "skipLibCheck": True,
        "resolveJsonModule": True,
        "typeRoots": ["index.d.ts"],
        "types": ["node", "jest"],
    },
    "include": ["**/*.ts", "**/*.tsx"],
    "exclude": [
        "node_modules",
        "babel.config.js",
        "metro.config.js",
        "jest.config.js",
        "**/*.test.tsx",
        "**/*.test.ts",
        "**/*.spec.tsx",
        "**/*.spec.ts",
    ],
}

CSPELL_CONFIG: dict[str, Any] = {
    "words": ["bytecode", "dapp"],
}


# ---------------------------------------------------------------------------
# .gitignore
# ---------------------------------------------------------------------------


def gitignore_blocks(ctx: ProjectContext) -> list[str]:
    """Blocks appended to ``.gitignore``; the lockfile of the unused manager is ignored."""
    return [
        "# Environment Variables (Store safe defaults in .env.example!)\n.env",
        "# Jest\n.snap",
        f"# Package Managers\n{'package-lock.json' if ctx.yarn else 'yarn.lock'}",
        "# Hardhat\nartifacts/\ncache/",
    ]
